"""Opening balance anchor management."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from balancekeeper.database.base import Database
from balancekeeper.domain.date_policy import default_opening_date, inferred_opening_date
from balancekeeper.domain.entities import Account, Valuation, ValuationKind
from balancekeeper.domain.errors import OPENING_DATE_NOT_BEFORE_OLDEST_ENTRY
from balancekeeper.domain.results import BalanceResult
from balancekeeper.domain.valuation_names import opening_anchor_name

logger = logging.getLogger(__name__)


class OpeningBalanceManager:
    """Reads and writes the opening anchor of one account.

    The opening anchor is the valuation entry that fixes the account's balance
    at the start of its tracked history. There is at most one per account and
    it is always updated in place.
    """

    def __init__(self, db: Database, account: Account):
        """Initialize opening balance manager.

        Args:
            db: Database instance
            account: Account whose opening anchor is managed
        """
        self.db = db
        self.account = account

    def _opening_anchor(self) -> Optional[Valuation]:
        return self.db.get_valuation(self.account.id, ValuationKind.OPENING_ANCHOR)

    def has_opening_anchor(self) -> bool:
        """Return True if the account has an opening anchor with a linked entry."""
        anchor = self._opening_anchor()
        return anchor is not None and not anchor.is_orphaned

    def opening_date(self) -> date:
        """Return the date the account's history starts.

        The anchor's date when one exists, otherwise inferred from the
        reconciliations and transactions on record, otherwise today.
        """
        anchor = self._opening_anchor()
        if anchor is not None and anchor.entry is not None:
            return anchor.entry.date

        return inferred_opening_date(
            oldest_valuation_date=self.db.get_oldest_valuation_date(
                self.account.id, [ValuationKind.RECONCILIATION]
            ),
            oldest_transaction_date=self.db.get_oldest_transaction_date(self.account.id),
        )

    def opening_balance(self) -> Decimal:
        """Return the opening anchor amount, or zero if there is none."""
        anchor = self._opening_anchor()
        if anchor is None or anchor.entry is None:
            return Decimal("0")
        return anchor.entry.amount

    def set_opening_balance(
        self, balance: Decimal, date: Optional[date] = None
    ) -> BalanceResult:
        """Create or update the opening anchor.

        Args:
            balance: Opening balance amount
            date: Opening date. When omitted a default is computed from the
                account's entries and is not validated; when given it must
                precede the oldest entry.

        Returns:
            BalanceResult describing the outcome
        """
        anchor = self._opening_anchor()
        anchor_entry = anchor.entry if anchor is not None else None

        oldest_entry_date = self.db.get_oldest_entry_date(
            self.account.id,
            exclude_entry_id=anchor_entry.id if anchor_entry is not None else None,
        )

        if date is not None:
            if oldest_entry_date is not None and date >= oldest_entry_date:
                return BalanceResult.failed(OPENING_DATE_NOT_BEFORE_OLDEST_ENTRY)
            resolved_date = date
        else:
            resolved_date = default_opening_date(oldest_entry_date)

        if anchor_entry is None:
            return self._create_opening_anchor(balance, resolved_date, anchor)

        return self._update_opening_anchor(anchor_entry, balance, date)

    def _create_opening_anchor(
        self, balance: Decimal, opening_date: date, orphan: Optional[Valuation]
    ) -> BalanceResult:
        self.db.create_valuation_entry(
            account_id=self.account.id,
            kind=ValuationKind.OPENING_ANCHOR,
            entry_date=opening_date,
            name=opening_anchor_name(self.account.account_type),
            amount=balance,
            currency=self.account.currency,
            valuation_id=orphan.id if orphan is not None else None,
        )
        logger.info(
            "Created opening anchor",
            extra={"account_id": self.account.id, "opening_date": opening_date.isoformat()},
        )
        return BalanceResult.ok(changes_made=True)

    def _update_opening_anchor(self, entry, balance: Decimal, new_date: Optional[date]) -> BalanceResult:
        amount_changed = entry.amount != balance
        # Only an explicitly requested date moves an existing anchor
        date_changed = new_date is not None and entry.date != new_date

        if not (amount_changed or date_changed):
            return BalanceResult.ok(changes_made=False)

        self.db.update_entry(
            entry.id,
            amount=balance if amount_changed else None,
            entry_date=new_date if date_changed else None,
        )
        logger.info(
            "Updated opening anchor",
            extra={
                "account_id": self.account.id,
                "amount_changed": amount_changed,
                "date_changed": date_changed,
            },
        )
        return BalanceResult.ok(changes_made=True)
