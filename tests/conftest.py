"""Shared test fixtures."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pytest
from numpy.random import PCG64DXSM, Generator
from numpy.typing import NDArray

from retirecast.config.schema import ReturnAssumption, ReturnAssumptions, SimulationParameters


class PinnedRandom:
    """Random source whose every uniform draw is the same value.

    Normals come from a Box-Muller transform of the pinned uniform, so with
    the default 0.5 every shock is ``-sqrt(2 ln 2)``.
    """

    def __init__(self, u: float = 0.5) -> None:
        self.u = u

    def random(self) -> float:
        return self.u

    def standard_normal(self, size: int) -> NDArray[np.floating[Any]]:
        z = math.sqrt(-2.0 * math.log(self.u)) * math.cos(2.0 * math.pi * self.u)
        return np.full(size, z)

    def integers(self, low: int, high: int) -> int:
        return low + int(self.u * (high - low))


ZERO_RETURNS = ReturnAssumptions(
    stocks=ReturnAssumption(mean=0.0, std_dev=0.0),
    bonds=ReturnAssumption(mean=0.0, std_dev=0.0),
    cash=ReturnAssumption(mean=0.0, std_dev=0.0),
)


@pytest.fixture
def rng() -> Generator:
    """Deterministic RNG for tests."""
    return Generator(PCG64DXSM(42))


@pytest.fixture
def pinned_rng() -> PinnedRandom:
    """Random source fixed at u = 0.5."""
    return PinnedRandom()


@pytest.fixture
def base_params() -> SimulationParameters:
    """Retired 65-year-old, one simulated year, no growth or inflation."""
    return SimulationParameters(
        current_age=65,
        retirement_age=65,
        life_expectancy=66,
        traditional_balance=100,
        roth_balance=20,
        taxable_balance=30,
        annual_contribution=0,
        contribution_type="split",
        annual_spending=50,
        ss_base_benefit=0,
        ss_claiming_age=67,
        stocks_percent=60,
        bonds_percent=30,
        use_glide_path=False,
        inflation_rate=0.0,
        include_healthcare=False,
        healthcare_cost_base=0,
        simulation_model="parameterized",
        custom_returns=ZERO_RETURNS,
        withdrawal_model="fixed",
        withdrawal_percent=4,
        birth_year=1960,
    )
