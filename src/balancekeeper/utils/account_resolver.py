"""Utility for resolving account names to IDs."""

from balancekeeper.domain.account import AccountService
from balancekeeper.domain.errors import NotFoundError, account_name_not_found, account_not_found


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve account name or ID to account ID.

    Args:
        account_service: AccountService instance
        account: Account name, or ID as int or numeric string

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    if isinstance(account, int) or str(account).isdigit():
        account_id = int(account)
        if account_service.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        return account_id

    account_obj = account_service.db.get_account_by_name(account)
    if account_obj is None:
        raise NotFoundError(account_name_not_found(account))
    return account_obj.id
