"""Historical resampling return model."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from retirecast.core.rng import RandomSource
from retirecast.io.yaml_loader import load_table
from retirecast.models.returns.base import AssetReturns


def load_historical_returns() -> NDArray[np.floating[Any]]:
    """Load the packaged table of real joint annual returns.

    Returns:
        Read-only array of shape (n_years, 3) with columns stocks, bonds, cash.
    """
    data: dict[str, Any] = load_table("historical_returns", ("rows",))
    table = np.array(data["rows"], dtype=float)
    table.setflags(write=False)
    return table


HISTORICAL_ANNUAL_RETURNS: NDArray[np.floating[Any]] = load_historical_returns()


class HistoricalResampleReturns:
    """Draw a whole historical year at random.

    Picking complete rows keeps the real cross-asset co-movement of each
    year, crisis years included, instead of sampling each asset separately.
    """

    def __init__(self, table: NDArray[np.floating[Any]] | None = None) -> None:
        """Initialize with historical data.

        Args:
            table: (n_years, 3) array of annual returns; defaults to the
                packaged table.
        """
        self._table = HISTORICAL_ANNUAL_RETURNS if table is None else np.asarray(table)
        self._n_years = self._table.shape[0]

    @property
    def n_years(self) -> int:
        """Number of historical years available for resampling."""
        return self._n_years

    def draw(self, rng: RandomSource) -> AssetReturns:
        """Return one uniformly chosen historical row, unmodified."""
        idx = int(rng.integers(0, self._n_years))
        stocks, bonds, cash = self._table[idx]
        return AssetReturns(stocks=float(stocks), bonds=float(bonds), cash=float(cash))
