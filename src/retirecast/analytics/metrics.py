"""Reduction of many projected paths into a distributional summary."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from retirecast.core.engine import SinglePathResult

PERCENTILE_KEYS: tuple[int, ...] = (10, 25, 50, 75, 90)


@dataclass(frozen=True)
class MonteCarloSummary:
    """Computed statistics from a Monte Carlo run.

    ``success_rate`` is a percentage (0-100). Percentile dicts are keyed
    ``"p10"`` ... ``"p90"``; per-year arrays have one entry per balance
    snapshot, starting with the initial balance.
    """

    total_simulations: int
    success_count: int
    success_rate: float
    final_balance_percentiles: dict[str, float]
    balance_percentiles: dict[str, NDArray[np.floating[Any]]] = field(repr=False)
    mean_balances: NDArray[np.floating[Any]] = field(repr=False)
    avg_depletion_age: float | None
    depletion_count: int
    config_hash: str = ""
    engine_version: str = ""

    @property
    def median_final_balance(self) -> float:
        """50th-percentile final balance."""
        return self.final_balance_percentiles["p50"]

    @property
    def n_points(self) -> int:
        """Number of yearly snapshots in each band."""
        return len(self.mean_balances)


def percentile_index(n: int, percentile: float) -> int:
    """Nearest-rank index into an ascending sample of size ``n`` (``n > 0``)."""
    return min(math.floor((percentile / 100) * n), n - 1)


def percentile_value(
    sorted_values: Sequence[float] | NDArray[np.floating[Any]],
    percentile: float,
) -> float:
    """Value at ``percentile`` of an ascending-sorted sample.

    Nearest-rank, no interpolation: element ``floor(p/100 * n)``, clamped to
    the last index. An empty sample yields 0.
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0
    return float(sorted_values[percentile_index(n, percentile)])


def summarize(
    results: Sequence[SinglePathResult],
    n_points: int,
) -> MonteCarloSummary:
    """Compute summary statistics from per-path results.

    Args:
        results: One result per trial; every ``yearly_balances`` has length
            ``n_points``.
        n_points: Balance snapshots per path (simulated years + 1).

    Returns:
        MonteCarloSummary with success, percentile and depletion statistics.
    """
    n = len(results)
    success_count = sum(1 for r in results if r.success)
    success_rate = success_count / n * 100.0 if n else 0.0

    final_balances = np.sort(np.array([r.final_balance for r in results], dtype=float))
    final_pcts = {f"p{p}": percentile_value(final_balances, p) for p in PERCENTILE_KEYS}

    # (n_trials, n_points), sorted down each year's column
    if n:
        history = np.array([r.yearly_balances for r in results], dtype=float)
        sorted_history = np.sort(history, axis=0)
        balance_pcts = {
            f"p{p}": sorted_history[percentile_index(n, p)].copy() for p in PERCENTILE_KEYS
        }
        mean_balances = history.mean(axis=0)
    else:
        balance_pcts = {f"p{p}": np.zeros(n_points) for p in PERCENTILE_KEYS}
        mean_balances = np.zeros(n_points)

    depletion_ages = [r.depleted_at_age for r in results if not r.success]
    avg_depletion_age = (
        sum(a for a in depletion_ages if a is not None) / len(depletion_ages)
        if depletion_ages
        else None
    )

    return MonteCarloSummary(
        total_simulations=n,
        success_count=success_count,
        success_rate=success_rate,
        final_balance_percentiles=final_pcts,
        balance_percentiles=balance_pcts,
        mean_balances=mean_balances,
        avg_depletion_age=avg_depletion_age,
        depletion_count=len(depletion_ages),
    )
