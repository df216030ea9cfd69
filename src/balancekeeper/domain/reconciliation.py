"""Reconciliation entries: manually confirmed balances on a given date."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from balancekeeper.database.base import Database
from balancekeeper.domain.entities import Account, Entry, ValuationKind
from balancekeeper.domain.errors import DomainError
from balancekeeper.domain.results import ReconciliationResult
from balancekeeper.domain.valuation_names import reconciliation_name

logger = logging.getLogger(__name__)


class ReconciliationCollaborator(Protocol):
    """Anything that can record a reconciled balance for a date."""

    def reconcile_balance(
        self,
        balance: Decimal,
        date: date,
        existing_valuation_entry: Optional[Entry] = None,
    ) -> ReconciliationResult:
        ...


class ReconciliationManager:
    """Default reconciliation collaborator backed by the database.

    Keeps at most one reconciliation entry per account and calendar date.
    """

    def __init__(self, db: Database, account: Account):
        """Initialize reconciliation manager.

        Args:
            db: Database instance
            account: Account whose reconciliations are managed
        """
        self.db = db
        self.account = account

    def reconcile_balance(
        self,
        balance: Decimal,
        date: Optional[date] = None,
        existing_valuation_entry: Optional[Entry] = None,
        dry_run: bool = False,
    ) -> ReconciliationResult:
        """Record ``balance`` as the confirmed balance on ``date``.

        Args:
            balance: Confirmed balance
            date: Reconciliation date (defaults to today)
            existing_valuation_entry: Reconciliation entry to update in place
            dry_run: Validate only, write nothing

        Returns:
            ReconciliationResult; repository failures are reported, not raised
        """
        reconciliation_date = date or _today()

        entry = existing_valuation_entry
        if entry is None:
            entry = self.db.get_valuation_entry_on(
                self.account.id, ValuationKind.RECONCILIATION, reconciliation_date
            )
        elif entry.valuation_kind != ValuationKind.RECONCILIATION:
            return ReconciliationResult(
                success=False,
                error_message=f"Entry {entry.id} is not a reconciliation",
            )

        if dry_run:
            return ReconciliationResult(success=True)

        try:
            if entry is None:
                self.db.create_valuation_entry(
                    account_id=self.account.id,
                    kind=ValuationKind.RECONCILIATION,
                    entry_date=reconciliation_date,
                    name=reconciliation_name(self.account.account_type),
                    amount=balance,
                    currency=self.account.currency,
                )
            else:
                self.db.update_entry(entry.id, amount=balance, entry_date=reconciliation_date)
        except (SQLAlchemyError, DomainError) as e:
            logger.warning(
                "Reconciliation failed",
                extra={"account_id": self.account.id, "error": str(e)},
            )
            return ReconciliationResult(success=False, error_message=str(e))

        return ReconciliationResult(success=True)


def _today() -> date:
    return date.today()
