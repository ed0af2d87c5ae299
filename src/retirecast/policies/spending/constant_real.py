"""Constant real spending policy."""

from __future__ import annotations

from retirecast.core.state import AccountState


class ConstantRealSpending:
    """Spend a fixed real amount each year, adjusted for inflation.

    The nominal spending grows with cumulative inflation to maintain
    constant purchasing power.
    """

    def __init__(self, annual_spending: float) -> None:
        self._base = annual_spending

    def compute(self, state: AccountState, age: int) -> float:
        """Return inflation-adjusted annual spending."""
        return self._base * state.cumulative_inflation
