"""Current balance management.

``set_current_balance`` is the single entry point used to record an account's
latest known balance. How that balance is recorded depends on where the
account's data comes from:

* linked accounts keep one current anchor, refreshed to today;
* manual cash accounts that were never reconciled shift their opening anchor
  by the difference from the cached balance;
* every other manual account records a reconciliation for today.

Whatever the strategy, the cached balance on the account is written
afterwards so reads reflect the new value immediately.
"""

import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from balancekeeper.database.base import Database
from balancekeeper.domain.entities import Account, ValuationKind
from balancekeeper.domain.errors import NotFoundError, account_not_found
from balancekeeper.domain.opening_balance import OpeningBalanceManager
from balancekeeper.domain.reconciliation import ReconciliationCollaborator, ReconciliationManager
from balancekeeper.domain.results import BalanceResult
from balancekeeper.domain.valuation_names import current_anchor_name

logger = logging.getLogger(__name__)


class BalanceStrategy(Enum):
    """The ways a new current balance can be recorded."""

    ANCHOR_UPSERT = "anchor_upsert"
    OPENING_DELTA = "opening_delta"
    RECONCILIATION = "reconciliation"


class CurrentBalanceManager:
    """Reads and writes the current balance of one account."""

    def __init__(
        self,
        db: Database,
        account: Account,
        opening_balance_manager: Optional[OpeningBalanceManager] = None,
        reconciliation_manager: Optional[ReconciliationCollaborator] = None,
    ):
        """Initialize current balance manager.

        Args:
            db: Database instance
            account: Account whose balance is managed
            opening_balance_manager: Used by the opening delta strategy
                (defaults to one built on ``db``)
            reconciliation_manager: Used by the reconciliation strategy
                (defaults to ReconciliationManager)
        """
        self.db = db
        self.account = account
        self._opening_balance_manager = opening_balance_manager
        self._reconciliation_manager = reconciliation_manager

    @property
    def opening_balance_manager(self) -> OpeningBalanceManager:
        if self._opening_balance_manager is None:
            self._opening_balance_manager = OpeningBalanceManager(self.db, self.account)
        return self._opening_balance_manager

    @property
    def reconciliation_manager(self) -> ReconciliationCollaborator:
        if self._reconciliation_manager is None:
            self._reconciliation_manager = ReconciliationManager(self.db, self.account)
        return self._reconciliation_manager

    def _refresh_account(self) -> Account:
        account = self.db.get_account(self.account.id)
        if account is None:
            raise NotFoundError(account_not_found(self.account.id))
        self.account = account
        return account

    def has_current_anchor(self) -> bool:
        """Return True if the account has a current anchor with a linked entry."""
        anchor = self.db.get_valuation(self.account.id, ValuationKind.CURRENT_ANCHOR)
        return anchor is not None and not anchor.is_orphaned

    def current_date(self) -> date:
        """Return the current anchor's date, or today without one."""
        anchor = self.db.get_valuation(self.account.id, ValuationKind.CURRENT_ANCHOR)
        if anchor is not None and anchor.entry is not None:
            return anchor.entry.date
        return date.today()

    def current_balance(self) -> Decimal:
        """Return the current anchor's amount, or the cached account balance."""
        anchor = self.db.get_valuation(self.account.id, ValuationKind.CURRENT_ANCHOR)
        if anchor is not None and anchor.entry is not None:
            return anchor.entry.amount

        account = self.db.get_account(self.account.id) or self.account
        logger.warning(
            "No current balance anchor found, falling back to cached account balance",
            extra={"account_id": account.id, "cached_balance": str(account.balance)},
        )
        return account.balance

    def select_strategy(self) -> BalanceStrategy:
        """Classify the account and pick how its current balance is recorded."""
        if self.account.linked:
            return BalanceStrategy.ANCHOR_UPSERT

        if self.account.is_cash_type and not self._has_reconciliations():
            return BalanceStrategy.OPENING_DELTA

        return BalanceStrategy.RECONCILIATION

    def _has_reconciliations(self) -> bool:
        return self.db.count_valuations(self.account.id, ValuationKind.RECONCILIATION) > 0

    def set_current_balance(self, balance: Decimal) -> BalanceResult:
        """Record ``balance`` as the account's current balance.

        Failures are reported through the returned BalanceResult. When the
        chosen strategy reports a failure the result still has
        ``changes_made`` set, because the cached balance has been written.

        Args:
            balance: New current balance

        Returns:
            BalanceResult describing the outcome
        """
        try:
            account = self._refresh_account()
            strategy = self.select_strategy()
            logger.debug(
                "Setting current balance",
                extra={"account_id": account.id, "strategy": strategy.value},
            )
            outcome = self._apply_strategy(strategy, balance)
        except Exception as e:
            logger.exception("Setting current balance failed", extra={"account_id": self.account.id})
            return BalanceResult.failed(str(e))

        try:
            self.db.update_account_balance(account.id, balance)
        except Exception as e:
            logger.exception("Updating cached balance failed", extra={"account_id": account.id})
            return BalanceResult.failed(str(e))

        if not outcome.success:
            # TODO: confirm with product whether a failed strategy should still report changes_made
            return BalanceResult.failed(outcome.error, changes_made=True)

        return BalanceResult.ok(changes_made=outcome.changes_made)

    def _apply_strategy(self, strategy: BalanceStrategy, balance: Decimal) -> BalanceResult:
        if strategy is BalanceStrategy.ANCHOR_UPSERT:
            return self._upsert_current_anchor(balance)
        if strategy is BalanceStrategy.OPENING_DELTA:
            return self._adjust_opening_balance(balance)
        return self._reconcile(balance)

    def _upsert_current_anchor(self, balance: Decimal) -> BalanceResult:
        today = date.today()
        anchor = self.db.get_valuation(self.account.id, ValuationKind.CURRENT_ANCHOR)

        if anchor is None or anchor.entry is None:
            self.db.create_valuation_entry(
                account_id=self.account.id,
                kind=ValuationKind.CURRENT_ANCHOR,
                entry_date=today,
                name=current_anchor_name(self.account.account_type),
                amount=balance,
                currency=self.account.currency,
                valuation_id=anchor.id if anchor is not None else None,
            )
            return BalanceResult.ok(changes_made=True)

        entry = anchor.entry
        amount_changed = entry.amount != balance
        date_changed = entry.date != today
        if amount_changed or date_changed:
            self.db.update_entry(
                entry.id,
                amount=balance if amount_changed else None,
                entry_date=today if date_changed else None,
            )
        return BalanceResult.ok(changes_made=amount_changed or date_changed)

    def _adjust_opening_balance(self, balance: Decimal) -> BalanceResult:
        opening = self.opening_balance_manager
        delta = balance - self.account.balance
        return opening.set_opening_balance(
            balance=opening.opening_balance() + delta,
            date=opening.opening_date(),
        )

    def _reconcile(self, balance: Decimal) -> BalanceResult:
        today = date.today()
        existing = self.db.get_valuation_entry_on(
            self.account.id, ValuationKind.RECONCILIATION, today
        )
        result = self.reconciliation_manager.reconcile_balance(
            balance=balance,
            date=today,
            existing_valuation_entry=existing,
        )
        if result.success:
            return BalanceResult.ok(changes_made=True)
        return BalanceResult.failed(result.error_message, changes_made=True)
