"""Tests for spending policies."""

from __future__ import annotations

import numpy as np

from retirecast.core.state import AccountState
from retirecast.policies.spending.constant_real import ConstantRealSpending
from retirecast.policies.spending.life_expectancy import LifeExpectancySpending
from retirecast.policies.spending.percent_of_portfolio import PercentOfPortfolioSpending


def _make_state(total: float, cumulative_inflation: float = 1.0) -> AccountState:
    return AccountState(
        traditional=total / 2,
        roth=total / 4,
        taxable=total / 4,
        cumulative_inflation=cumulative_inflation,
    )


class TestConstantReal:
    def test_no_inflation(self) -> None:
        policy = ConstantRealSpending(50_000.0)
        assert policy.compute(_make_state(1_000_000), age=70) == 50_000.0

    def test_with_inflation(self) -> None:
        policy = ConstantRealSpending(50_000.0)
        np.testing.assert_allclose(policy.compute(_make_state(1_000_000, 1.1), age=70), 55_000.0)

    def test_independent_of_balance(self) -> None:
        policy = ConstantRealSpending(50_000.0)
        assert policy.compute(_make_state(0), age=70) == 50_000.0


class TestPercentOfPortfolio:
    def test_basic(self) -> None:
        policy = PercentOfPortfolioSpending(4.0)
        np.testing.assert_allclose(policy.compute(_make_state(1_000_000), age=70), 40_000.0)

    def test_zero_wealth(self) -> None:
        policy = PercentOfPortfolioSpending(4.0)
        assert policy.compute(_make_state(0), age=70) == 0.0


class TestLifeExpectancy:
    def test_divides_by_remaining_years(self) -> None:
        policy = LifeExpectancySpending(life_expectancy=90)
        np.testing.assert_allclose(policy.compute(_make_state(200_000), age=70), 10_000.0)

    def test_final_year_spends_everything(self) -> None:
        policy = LifeExpectancySpending(life_expectancy=90)
        assert policy.compute(_make_state(200_000), age=90) == 200_000

    def test_past_life_expectancy(self) -> None:
        policy = LifeExpectancySpending(life_expectancy=90)
        assert policy.compute(_make_state(200_000), age=93) == 200_000
