"""Tests for claiming-age-adjusted Social Security benefits."""

from __future__ import annotations

import numpy as np
import pytest

from retirecast.config.schema import SimulationParameters
from retirecast.core.engine import simulate_path
from retirecast.core.rng import RandomSource
from retirecast.income.benefits import (
    BENEFIT_ADJUSTMENTS,
    adjustment_factor,
    social_security_benefit,
)


class TestBenefitCalculator:
    def test_before_claiming_age(self) -> None:
        assert social_security_benefit(24_000, 67, 66) == 0.0

    def test_full_retirement_age(self) -> None:
        assert social_security_benefit(24_000, 67, 67) == 24_000

    @pytest.mark.parametrize(
        ("claiming_age", "factor"),
        [(62, 0.70), (65, 0.867), (67, 1.00), (70, 1.24)],
    )
    def test_adjustment_table(self, claiming_age: int, factor: float) -> None:
        assert adjustment_factor(claiming_age) == factor
        np.testing.assert_allclose(
            social_security_benefit(10_000, claiming_age, 80), 10_000 * factor
        )

    def test_unlisted_claiming_age_defaults_to_one(self) -> None:
        assert adjustment_factor(60) == 1.0
        assert social_security_benefit(10_000, 60, 61) == 10_000

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BENEFIT_ADJUSTMENTS[67] = 2.0  # type: ignore[index]


class TestBenefitEngineIntegration:
    def test_benefit_offsets_spending(
        self, base_params: SimulationParameters, pinned_rng: RandomSource
    ) -> None:
        params = base_params.model_copy(
            update={
                "current_age": 66,
                "life_expectancy": 67,
                "ss_base_benefit": 30,
                "ss_claiming_age": 67,
            }
        )
        result = simulate_path(params, pinned_rng)
        # Need 50 - 30 benefit = 20, all from taxable
        assert result.final_taxable == 10.0
        assert result.final_traditional == 100.0

    def test_benefit_larger_than_need(
        self, base_params: SimulationParameters, pinned_rng: RandomSource
    ) -> None:
        """Surplus benefit is not added to any account."""
        params = base_params.model_copy(
            update={"ss_base_benefit": 80, "ss_claiming_age": 62}
        )
        result = simulate_path(params, pinned_rng)
        assert result.final_balance == 150.0

    def test_benefit_inflation_adjusted(
        self, base_params: SimulationParameters, pinned_rng: RandomSource
    ) -> None:
        params = base_params.model_copy(
            update={
                "ss_base_benefit": 20,
                "ss_claiming_age": 65,
                "inflation_rate": 0.10,
                "taxable_balance": 100,
            }
        )
        result = simulate_path(params, pinned_rng)
        # (50 - 20 * 0.867) * 1.1 drawn from taxable
        np.testing.assert_allclose(result.final_taxable, 100 - (50 - 20 * 0.867) * 1.1)
