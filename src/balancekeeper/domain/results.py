"""Result envelopes returned by balance operations."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BalanceResult:
    """Outcome of a balance-changing operation.

    Expected domain violations are reported here instead of being raised.
    """

    success: bool
    changes_made: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls, changes_made: bool) -> "BalanceResult":
        return cls(success=True, changes_made=changes_made, error=None)

    @classmethod
    def failed(cls, error: str, changes_made: bool = False) -> "BalanceResult":
        return cls(success=False, changes_made=changes_made, error=error)


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome reported by a reconciliation collaborator."""

    success: bool
    error_message: Optional[str] = None
