"""Base protocol for spending policies."""

from __future__ import annotations

from typing import Protocol

from retirecast.core.state import AccountState


class SpendingPolicy(Protocol):
    """Protocol for computing a retired year's spending need."""

    def compute(self, state: AccountState, age: int) -> float:
        """Compute the nominal spending need for the year lived at ``age``."""
        ...
