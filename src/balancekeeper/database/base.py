"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from balancekeeper.domain.entities import (
    Account,
    AccountType,
    Entry,
    Valuation,
    ValuationKind,
)


class Database(ABC):
    """Abstract database interface for balancekeeper.

    The repository owns storage lifetime. Callers receive immutable domain
    entities and must not hold them across operations.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        currency: str,
        account_type: AccountType,
        linked: bool = False,
        balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_name(self, name: str) -> Optional[Account]:
        """Get account by name."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def update_account_balance(self, account_id: int, balance: Decimal) -> None:
        """Write the account's cached balance."""
        pass

    # Valuation operations
    @abstractmethod
    def get_valuation(self, account_id: int, kind: ValuationKind) -> Optional[Valuation]:
        """Get the first valuation of a kind for an account, orphaned or not."""
        pass

    @abstractmethod
    def count_valuations(self, account_id: int, kind: ValuationKind) -> int:
        """Count valuations of a kind that are linked to an entry."""
        pass

    @abstractmethod
    def list_valuations(self, account_id: int, kind: ValuationKind) -> list[Valuation]:
        """List valuations of a kind, newest entry date first."""
        pass

    @abstractmethod
    def get_valuation_entry_on(
        self, account_id: int, kind: ValuationKind, on_date: date
    ) -> Optional[Entry]:
        """Get the entry of a valuation of the given kind dated ``on_date``."""
        pass

    @abstractmethod
    def create_valuation_entry(
        self,
        account_id: int,
        kind: ValuationKind,
        entry_date: date,
        name: str,
        amount: Decimal,
        currency: str,
        valuation_id: Optional[int] = None,
    ) -> Valuation:
        """Atomically create an entry and its valuation.

        When ``valuation_id`` names an orphaned valuation, the new entry is
        linked to it instead of creating a second valuation row.
        """
        pass

    # Entry operations
    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def update_entry(
        self,
        entry_id: int,
        amount: Optional[Decimal] = None,
        entry_date: Optional[date] = None,
        currency: Optional[str] = None,
    ) -> Entry:
        """Update an entry in place. Returns the updated entry."""
        pass

    @abstractmethod
    def create_transaction_entry(
        self,
        account_id: int,
        entry_date: date,
        amount: Decimal,
        name: str,
        currency: str,
        notes: Optional[str] = None,
    ) -> int:
        """Create a transaction entry. Returns entry ID."""
        pass

    @abstractmethod
    def list_entries(self, account_id: int) -> list[Entry]:
        """List all entries of an account, newest first."""
        pass

    # Date bounds
    @abstractmethod
    def get_oldest_transaction_date(self, account_id: int) -> Optional[date]:
        """Earliest date among transaction entries."""
        pass

    @abstractmethod
    def get_oldest_valuation_date(
        self, account_id: int, kinds: Sequence[ValuationKind]
    ) -> Optional[date]:
        """Earliest date among valuation entries of the given kinds."""
        pass

    @abstractmethod
    def get_oldest_entry_date(
        self, account_id: int, exclude_entry_id: Optional[int] = None
    ) -> Optional[date]:
        """Earliest date among all entries, optionally skipping one entry."""
        pass
