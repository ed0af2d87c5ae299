"""Tests for percentile extraction and summary reduction."""

from __future__ import annotations

import numpy as np
import pytest

from retirecast.analytics.metrics import (
    PERCENTILE_KEYS,
    percentile_index,
    percentile_value,
    summarize,
)
from retirecast.core.engine import SinglePathResult


def _success(balances: list[float]) -> SinglePathResult:
    return SinglePathResult(
        success=True,
        final_balance=balances[-1],
        yearly_balances=tuple(balances),
        depleted_at_age=None,
        final_traditional=balances[-1],
        final_roth=0.0,
        final_taxable=0.0,
    )


def _depleted(balances: list[float], age: int) -> SinglePathResult:
    return SinglePathResult(
        success=False,
        final_balance=0.0,
        yearly_balances=tuple(balances),
        depleted_at_age=age,
        final_traditional=0.0,
        final_roth=0.0,
        final_taxable=0.0,
    )


class TestPercentileValue:
    def test_nearest_rank(self) -> None:
        values = list(range(10))
        assert percentile_value(values, 10) == 1
        assert percentile_value(values, 50) == 5
        assert percentile_value(values, 90) == 9

    def test_clamped_to_last(self) -> None:
        assert percentile_value([1.0, 2.0, 3.0], 100) == 3.0

    def test_empty(self) -> None:
        assert percentile_value([], 50) == 0.0

    def test_single(self) -> None:
        assert percentile_value([42.0], 10) == 42.0
        assert percentile_value([42.0], 90) == 42.0

    def test_no_interpolation(self) -> None:
        assert percentile_value([0.0, 100.0], 50) == 100.0
        assert percentile_value([0.0, 100.0], 25) == 0.0

    def test_monotonic(self) -> None:
        values = np.sort(np.random.default_rng(0).lognormal(size=137))
        p10, p50, p90 = (percentile_value(values, p) for p in (10, 50, 90))
        assert p10 <= p50 <= p90

    def test_index(self) -> None:
        assert percentile_index(20, 90) == 18
        assert percentile_index(3, 99) == 2


class TestSummarize:
    def test_counts(self) -> None:
        results = [
            _success([100.0, 110.0, 120.0]),
            _success([100.0, 90.0, 80.0]),
            _depleted([100.0, 0.0, 0.0], age=66),
            _depleted([100.0, 50.0, 0.0], age=67),
        ]
        summary = summarize(results, n_points=3)
        assert summary.total_simulations == 4
        assert summary.success_count == 2
        assert summary.success_rate == 50.0
        assert summary.depletion_count == 2
        assert summary.avg_depletion_age == 66.5

    def test_final_balance_percentiles(self) -> None:
        results = [_success([100.0, float(v)]) for v in range(10)]
        summary = summarize(results, n_points=2)
        assert summary.final_balance_percentiles == {
            "p10": 1.0,
            "p25": 2.0,
            "p50": 5.0,
            "p75": 7.0,
            "p90": 9.0,
        }
        assert summary.median_final_balance == 5.0

    def test_per_year_bands_sorted_per_column(self) -> None:
        """Each year is sorted on its own, not by whole path."""
        results = [
            _success([0.0, 30.0]),
            _success([10.0, 20.0]),
            _success([20.0, 10.0]),
        ]
        summary = summarize(results, n_points=2)
        np.testing.assert_array_equal(summary.balance_percentiles["p10"], [0.0, 10.0])
        np.testing.assert_array_equal(summary.balance_percentiles["p50"], [10.0, 20.0])
        np.testing.assert_array_equal(summary.balance_percentiles["p90"], [20.0, 30.0])
        np.testing.assert_allclose(summary.mean_balances, [10.0, 20.0])

    def test_band_keys(self) -> None:
        summary = summarize([_success([1.0, 2.0])], n_points=2)
        assert set(summary.balance_percentiles) == {f"p{p}" for p in PERCENTILE_KEYS}
        assert summary.n_points == 2

    def test_no_failures(self) -> None:
        summary = summarize([_success([1.0, 2.0])], n_points=2)
        assert summary.avg_depletion_age is None
        assert summary.depletion_count == 0
        assert summary.success_rate == 100.0

    def test_empty(self) -> None:
        summary = summarize([], n_points=4)
        assert summary.total_simulations == 0
        assert summary.success_rate == 0.0
        assert summary.median_final_balance == 0.0
        assert len(summary.mean_balances) == 4
        assert summary.avg_depletion_age is None

    def test_bands_ordered(self) -> None:
        rng = np.random.default_rng(1)
        results = [_success(list(rng.uniform(0, 1_000, size=5))) for _ in range(50)]
        summary = summarize(results, n_points=5)
        bands = [summary.balance_percentiles[f"p{p}"] for p in PERCENTILE_KEYS]
        for lower, upper in zip(bands, bands[1:]):
            assert np.all(lower <= upper)

    def test_success_rate_is_percent(self) -> None:
        results = [_success([1.0])] + [_depleted([1.0], age=70)] * 3
        assert summarize(results, n_points=1).success_rate == pytest.approx(25.0)
