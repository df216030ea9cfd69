"""Display names for valuation entries."""

from balancekeeper.domain.entities import AccountType

OPENING_BALANCE_NAME = "Opening balance"

_CURRENT_ANCHOR_NAMES = {
    AccountType.PROPERTY: "Current market value",
    AccountType.VEHICLE: "Current market value",
    AccountType.LOAN: "Current loan balance",
}

_VALUE_UPDATE_TYPES = frozenset(
    {
        AccountType.PROPERTY,
        AccountType.VEHICLE,
        AccountType.INVESTMENT,
        AccountType.CRYPTO,
        AccountType.OTHER_ASSET,
    }
)


def opening_anchor_name(account_type: AccountType) -> str:
    """Opening anchors share one name across account types."""
    return OPENING_BALANCE_NAME


def current_anchor_name(account_type: AccountType) -> str:
    return _CURRENT_ANCHOR_NAMES.get(account_type, "Current balance")


def reconciliation_name(account_type: AccountType) -> str:
    if account_type in _VALUE_UPDATE_TYPES:
        return "Manual value update"
    return "Manual balance update"
