"""Mutable account state advanced once per simulated year."""

from __future__ import annotations

from dataclasses import dataclass

from retirecast.config.schema import SimulationParameters


@dataclass
class AccountState:
    """Balances of the three account types for one in-progress projection.

    Owned by a single path; never shared between trials. Balances are kept
    non-negative: growth is floored at zero and withdrawals are clamped to
    what each account holds.

    Attributes:
        traditional: Tax-deferred balance.
        roth: Roth balance.
        taxable: Taxable brokerage balance.
        cumulative_inflation: Price level relative to the start (starts at 1.0).
        healthcare_cost: Current nominal annual healthcare cost.
    """

    traditional: float
    roth: float
    taxable: float
    cumulative_inflation: float = 1.0
    healthcare_cost: float = 0.0

    @classmethod
    def initialize(cls, params: SimulationParameters) -> AccountState:
        """Create the starting state from household parameters."""
        return cls(
            traditional=params.traditional_balance,
            roth=params.roth_balance,
            taxable=params.taxable_balance,
            cumulative_inflation=1.0,
            healthcare_cost=params.healthcare_cost_base,
        )

    @property
    def total(self) -> float:
        """Sum of all three balances."""
        return self.traditional + self.roth + self.taxable

    def apply_return(self, portfolio_return: float) -> None:
        """Grow every account by the same blended return, flooring at zero."""
        growth = 1.0 + portfolio_return
        self.traditional = max(self.traditional * growth, 0.0)
        self.roth = max(self.roth * growth, 0.0)
        self.taxable = max(self.taxable * growth, 0.0)
