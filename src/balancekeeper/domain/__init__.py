"""Domain layer for balancekeeper application.

Services live in their own modules (``balancekeeper.domain.opening_balance``,
``balancekeeper.domain.current_balance`` ...) and are imported from there, so
that the database layer can depend on the entities without a cycle.
"""

from balancekeeper.domain.entities import (
    Account,
    AccountType,
    Entry,
    Valuation,
    ValuationKind,
)
from balancekeeper.domain.results import BalanceResult, ReconciliationResult

__all__ = [
    "Account",
    "AccountType",
    "Entry",
    "Valuation",
    "ValuationKind",
    "BalanceResult",
    "ReconciliationResult",
]
