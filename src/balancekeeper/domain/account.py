"""Account domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from balancekeeper.database.base import Database
from balancekeeper.domain.entities import Account as AccountEntity, AccountType, Entry, ValuationKind
from balancekeeper.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    duplicate_account_name,
    invalid_currency,
    transaction_before_opening,
    unknown_account_type,
)


class AccountService:
    """Service for managing accounts and their transaction entries."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        currency: str = "USD",
        account_type: AccountType | str = AccountType.DEPOSITORY,
        linked: bool = False,
        balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            currency: ISO currency code
            account_type: Account subtype
            linked: True if the balance comes from an external sync
            balance: Initial cached balance

        Returns:
            Account ID

        Raises:
            ValidationError: If currency or account type is invalid
            ConflictError: If account name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name cannot be empty")

        currency = currency.strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ValidationError(invalid_currency(currency))

        try:
            account_type = AccountType(account_type)
        except ValueError:
            raise ValidationError(unknown_account_type(str(account_type)))

        if self.db.get_account_by_name(name) is not None:
            raise ConflictError(duplicate_account_name(name))

        return self.db.create_account(
            name=name,
            currency=currency,
            account_type=account_type,
            linked=linked,
            balance=balance,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: int) -> AccountEntity:
        """Get account by ID, raising NotFoundError if it does not exist."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def add_transaction(
        self,
        account_id: int,
        entry_date: date,
        amount: Decimal,
        name: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Add a transaction entry to an account.

        The entry takes the account's currency. Once an opening anchor
        exists, transactions must be dated after it.

        Returns:
            Entry ID

        Raises:
            NotFoundError: If account not found
            ValidationError: If the date is on or before the opening anchor
        """
        account = self.require_account(account_id)

        opening = self.db.get_valuation(account.id, ValuationKind.OPENING_ANCHOR)
        if opening is not None and opening.entry is not None and entry_date <= opening.entry.date:
            raise ValidationError(transaction_before_opening(entry_date, opening.entry.date))

        return self.db.create_transaction_entry(
            account_id=account.id,
            entry_date=entry_date,
            amount=amount,
            name=name or "Transaction",
            currency=account.currency,
            notes=notes,
        )

    def list_entries(self, account_id: int) -> list[Entry]:
        """List an account's entries, newest first.

        Raises:
            NotFoundError: If account not found
        """
        self.require_account(account_id)
        return self.db.list_entries(account_id)
