"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the balance engine never touches
ORM rows directly.
"""

from decimal import Decimal

from balancekeeper.domain import entities as domain
from balancekeeper.database.models import (
    Account as ORMAccount,
    Entry as ORMEntry,
    Valuation as ORMValuation,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        currency=orm_account.currency,
        account_type=domain.AccountType(orm_account.account_type),
        linked=bool(orm_account.linked),
        balance=Decimal(orm_account.balance),
        created_at=orm_account.created_at,
    )


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    kind = None
    if orm_entry.valuation is not None:
        kind = domain.ValuationKind(orm_entry.valuation.kind)
    return domain.Entry(
        id=orm_entry.id,
        account_id=orm_entry.account_id,
        date=orm_entry.date,
        name=orm_entry.name,
        amount=Decimal(orm_entry.amount),
        currency=orm_entry.currency,
        entryable_type=orm_entry.entryable_type,
        valuation_kind=kind,
    )


def valuation_to_domain(orm_valuation: ORMValuation) -> domain.Valuation:
    """Convert SQLAlchemy Valuation model to domain Valuation entity.

    A valuation without a linked entry maps to ``entry=None``.
    """
    entry = None
    if orm_valuation.entry is not None:
        entry = entry_to_domain(orm_valuation.entry)
    return domain.Valuation(
        id=orm_valuation.id,
        account_id=orm_valuation.account_id,
        kind=domain.ValuationKind(orm_valuation.kind),
        entry=entry,
    )
