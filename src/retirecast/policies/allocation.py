"""Asset allocation policy: static split or age-based glide path."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Allocation:
    """Percentages (0-100) held in each asset class."""

    stocks_percent: float
    bonds_percent: float
    cash_percent: float

    def blend(self, stocks: float, bonds: float, cash: float) -> float:
        """Portfolio return for the given per-asset returns."""
        return (
            self.stocks_percent / 100.0 * stocks
            + self.bonds_percent / 100.0 * bonds
            + self.cash_percent / 100.0 * cash
        )


def static_allocation(stocks_percent: float, bonds_percent: float) -> Allocation:
    """Fixed split with whatever is left over held as cash."""
    return Allocation(
        stocks_percent=stocks_percent,
        bonds_percent=bonds_percent,
        cash_percent=100.0 - stocks_percent - bonds_percent,
    )


def glide_path_allocation(age: int, retirement_age: int) -> Allocation:
    """Age-based allocation that de-risks as the household ages.

    Before retirement stocks are ``110 - age`` clamped to [20, 90]; from
    retirement on they are ``100 - age`` clamped to [30, 70]. Bonds take
    ``100 - stocks - 10`` capped at 60, and cash gets the remainder.
    """
    if age < retirement_age:
        stocks = max(20, min(90, 110 - age))
    else:
        stocks = max(30, min(70, 100 - age))

    bonds = min(60, 100 - stocks - 10)
    cash = 100 - stocks - bonds
    return Allocation(stocks_percent=stocks, bonds_percent=bonds, cash_percent=cash)


def resolve_allocation(
    age: int,
    retirement_age: int,
    stocks_percent: float,
    bonds_percent: float,
    use_glide_path: bool,
) -> Allocation:
    """Allocation in force for a given simulated age."""
    if use_glide_path:
        return glide_path_allocation(age, retirement_age)
    return static_allocation(stocks_percent, bonds_percent)
