"""Parametric normal return model with a stocks/bonds correlation."""

from __future__ import annotations

import math

from retirecast.config.defaults import DEFAULT_RETURNS, STOCKS_BONDS_CORRELATION
from retirecast.config.schema import ReturnAssumptions
from retirecast.core.rng import RandomSource
from retirecast.models.returns.base import AssetReturns


class CorrelatedNormalReturns:
    """Generate annual returns from normal shocks with correlated stocks and bonds.

    Three independent standard normals ``z1, z2, z3`` become the shocks:

    - stocks: ``z1``
    - bonds: ``rho * z1 + sqrt(1 - rho**2) * z2`` (unit variance, correlation ``rho``
      with the stock shock)
    - cash: ``z3``, independent of both

    Each asset's return is ``mean + std_dev * shock``.
    """

    def __init__(
        self,
        assumptions: ReturnAssumptions | None = None,
        stocks_bonds_correlation: float = STOCKS_BONDS_CORRELATION,
    ) -> None:
        self._assumptions = assumptions if assumptions is not None else DEFAULT_RETURNS
        self._rho = stocks_bonds_correlation
        self._rho_complement = math.sqrt(1.0 - stocks_bonds_correlation**2)

    @property
    def assumptions(self) -> ReturnAssumptions:
        """Mean/volatility table in use."""
        return self._assumptions

    def draw(self, rng: RandomSource) -> AssetReturns:
        """Generate one year of correlated returns."""
        z1, z2, z3 = (float(z) for z in rng.standard_normal(3))

        stock_shock = z1
        bond_shock = self._rho * z1 + self._rho_complement * z2
        cash_shock = z3

        a = self._assumptions
        return AssetReturns(
            stocks=a.stocks.mean + a.stocks.std_dev * stock_shock,
            bonds=a.bonds.mean + a.bonds.std_dev * bond_shock,
            cash=a.cash.mean + a.cash.std_dev * cash_shock,
        )
