"""Base protocol for return models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from retirecast.core.rng import RandomSource


@dataclass(frozen=True, slots=True)
class AssetReturns:
    """One year's realized returns per asset class, as fractions."""

    stocks: float
    bonds: float
    cash: float


class ReturnModel(Protocol):
    """Protocol for annual asset return generators."""

    def draw(self, rng: RandomSource) -> AssetReturns:
        """Generate one year of (stocks, bonds, cash) returns."""
        ...
