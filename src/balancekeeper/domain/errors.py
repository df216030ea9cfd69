"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


OPENING_DATE_NOT_BEFORE_OLDEST_ENTRY = (
    "Opening balance date must be before the oldest entry date"
)


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_name_not_found(name: str) -> str:
    """Return message for missing account looked up by name."""
    return f"Account '{name}' not found"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def unknown_account_type(value: str) -> str:
    """Return message for an unrecognized account type."""
    return f"Unknown account type '{value}'"


def invalid_currency(value: str) -> str:
    """Return message for a malformed currency code."""
    return f"Invalid currency code '{value}': expected a 3-letter code"


def transaction_before_opening(entry_date, opening_date) -> str:
    """Return message for a transaction dated on or before the opening anchor."""
    return (
        f"Transaction date {entry_date.isoformat()} must be after the "
        f"opening balance date {opening_date.isoformat()}"
    )
