"""Utility functions for balancekeeper."""

from balancekeeper.utils.parsing import parse_amount, parse_date
from balancekeeper.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "resolve_account"]
