"""Parsing helpers for dates and amounts entered on the command line."""

import re
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_AGO_PATTERN = re.compile(r"^(\d+)\s+(day|week|month|year)s?\s+ago$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts absolute dates ("2024-01-15", "January 15, 2024"), the words
    "today" and "yesterday", and offsets such as "3 days ago" or
    "1 year ago".

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    match = _AGO_PATTERN.match(text)
    if match:
        count, unit = int(match.group(1)), match.group(2)
        return today - relativedelta(**{f"{unit}s": count})

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles "1234.5", "-$1,234.56", "€12" and accounting-style "(12.00)".

    Raises:
        ValueError: If amount string cannot be parsed
    """
    text = amount_str.strip() if amount_str else ""
    if not text:
        raise ValueError("Empty amount string")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]

    text = re.sub(r"[$€£¥,\s]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if negative else amount
