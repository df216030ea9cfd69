"""Tests for opening date rules."""

from datetime import date

from balancekeeper.domain.date_policy import (
    day_before,
    default_opening_date,
    inferred_opening_date,
    lookback_start,
)

TODAY = date(2024, 6, 15)


def test_day_before_crosses_month():
    assert day_before(date(2024, 3, 1)) == date(2024, 2, 29)


def test_lookback_start_is_two_years_back():
    assert lookback_start(TODAY) == date(2022, 6, 15)


def test_lookback_start_from_leap_day():
    assert lookback_start(date(2024, 2, 29)) == date(2022, 2, 28)


def test_lookback_start_defaults_to_today():
    today = date.today()
    assert lookback_start() == lookback_start(today)


class TestInferredOpeningDate:
    """Tests for inferred_opening_date."""

    def test_today_without_history(self):
        assert inferred_opening_date(None, None, today=TODAY) == TODAY

    def test_valuation_only(self):
        assert inferred_opening_date(date(2024, 1, 10), None, today=TODAY) == date(2024, 1, 10)

    def test_transaction_only(self):
        assert inferred_opening_date(None, date(2024, 1, 10), today=TODAY) == date(2024, 1, 9)

    def test_valuation_earlier(self):
        assert inferred_opening_date(date(2024, 1, 1), date(2024, 1, 10), today=TODAY) == date(2024, 1, 1)

    def test_transaction_earlier(self):
        assert inferred_opening_date(date(2024, 1, 10), date(2024, 1, 5), today=TODAY) == date(2024, 1, 4)

    def test_transaction_day_after_valuation_ties(self):
        assert inferred_opening_date(date(2024, 1, 10), date(2024, 1, 11), today=TODAY) == date(2024, 1, 10)


class TestDefaultOpeningDate:
    """Tests for default_opening_date."""

    def test_two_years_back_without_entries(self):
        assert default_opening_date(None, today=TODAY) == date(2022, 6, 15)

    def test_recent_entry_capped_at_lookback(self):
        assert default_opening_date(date(2024, 5, 1), today=TODAY) == date(2022, 6, 15)

    def test_old_entry_uses_day_before(self):
        assert default_opening_date(date(2020, 3, 1), today=TODAY) == date(2020, 2, 29)

    def test_entry_on_lookback_boundary(self):
        assert default_opening_date(date(2022, 6, 15), today=TODAY) == date(2022, 6, 14)
