"""Domain model entities for balancekeeper.

These are pure data classes representing business concepts, independent of
database schema. The balance engine only ever sees these, never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Account subtype. Drives cash-type classification and display names."""

    DEPOSITORY = "depository"
    CREDIT_CARD = "credit_card"
    INVESTMENT = "investment"
    CRYPTO = "crypto"
    LOAN = "loan"
    OTHER_LIABILITY = "other_liability"
    PROPERTY = "property"
    VEHICLE = "vehicle"
    OTHER_ASSET = "other_asset"


NON_CASH_ACCOUNT_TYPES = frozenset(
    {AccountType.PROPERTY, AccountType.VEHICLE, AccountType.OTHER_ASSET}
)


class ValuationKind(str, Enum):
    """Tag carried by every valuation entry."""

    OPENING_ANCHOR = "opening_anchor"
    CURRENT_ANCHOR = "current_anchor"
    RECONCILIATION = "reconciliation"


ENTRYABLE_VALUATION = "Valuation"
ENTRYABLE_TRANSACTION = "Transaction"


@dataclass(frozen=True)
class Account:
    """Account domain entity.

    ``balance`` is the denormalized cached balance used for fast reads.
    """

    id: int
    name: str
    currency: str
    account_type: AccountType
    linked: bool
    balance: Decimal
    created_at: datetime

    @property
    def is_cash_type(self) -> bool:
        return self.account_type not in NON_CASH_ACCOUNT_TYPES


@dataclass(frozen=True)
class Entry:
    """Dated financial record attached to a transaction or a valuation."""

    id: int
    account_id: int
    date: date
    name: str
    amount: Decimal
    currency: str
    entryable_type: str
    valuation_kind: Optional[ValuationKind] = None

    @property
    def is_valuation(self) -> bool:
        return self.entryable_type == ENTRYABLE_VALUATION

    @property
    def is_transaction(self) -> bool:
        return self.entryable_type == ENTRYABLE_TRANSACTION


@dataclass(frozen=True)
class Valuation:
    """Valuation domain entity.

    Amount and date are always read through ``entry``. A valuation whose
    entry is missing is orphaned and reads as a zero balance.
    """

    id: int
    account_id: int
    kind: ValuationKind
    entry: Optional[Entry]

    @property
    def is_orphaned(self) -> bool:
        return self.entry is None
