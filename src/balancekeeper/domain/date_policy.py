"""Date rules shared by the opening and current balance managers."""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

OPENING_LOOKBACK = relativedelta(years=2)


def day_before(value: date) -> date:
    """Return the calendar day before ``value``."""
    return value - timedelta(days=1)


def lookback_start(today: Optional[date] = None) -> date:
    """Return the date two years before today.

    Feb 29 maps to Feb 28 in non-leap target years.
    """
    today = today or date.today()
    return today - OPENING_LOOKBACK


def inferred_opening_date(
    oldest_valuation_date: Optional[date],
    oldest_transaction_date: Optional[date],
    today: Optional[date] = None,
) -> date:
    """Infer where an account's history starts when it has no opening anchor.

    Valuations count on their own date, transactions on the day before the
    earliest one. With no history at all the answer is today.
    """
    candidates = []
    if oldest_valuation_date is not None:
        candidates.append(oldest_valuation_date)
    if oldest_transaction_date is not None:
        candidates.append(day_before(oldest_transaction_date))
    if not candidates:
        return today or date.today()
    return min(candidates)


def default_opening_date(
    oldest_entry_date: Optional[date], today: Optional[date] = None
) -> date:
    """Default date used when an opening balance is written without one.

    The day before the oldest entry, capped at two years ago. With no entries
    it is simply two years ago.
    """
    start = lookback_start(today)
    if oldest_entry_date is None:
        return start
    return min(day_before(oldest_entry_date), start)
