"""Life-expectancy divisor spending policy."""

from __future__ import annotations

from retirecast.core.state import AccountState


class LifeExpectancySpending:
    """Spread the portfolio evenly over the years left to life expectancy.

    Annual spending = total balance / remaining years. When no years remain
    the whole portfolio is spent.
    """

    def __init__(self, life_expectancy: int) -> None:
        self._life_expectancy = life_expectancy

    def compute(self, state: AccountState, age: int) -> float:
        """Compute spending based on remaining life expectancy."""
        total = state.total
        remaining_years = self._life_expectancy - age
        if remaining_years <= 0:
            return total
        return total / remaining_years
