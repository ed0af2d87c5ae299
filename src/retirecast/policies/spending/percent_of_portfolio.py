"""Percent-of-portfolio spending policy."""

from __future__ import annotations

from retirecast.core.state import AccountState


class PercentOfPortfolioSpending:
    """Spend a fixed percentage of total portfolio value each year.

    Annual spending = (percent / 100) * total balance.
    """

    def __init__(self, withdrawal_percent: float) -> None:
        self._rate = withdrawal_percent / 100.0

    def compute(self, state: AccountState, age: int) -> float:
        return self._rate * state.total
