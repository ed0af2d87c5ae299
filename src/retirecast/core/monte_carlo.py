"""Monte Carlo aggregation: many independent paths, one summary."""

from __future__ import annotations

import concurrent.futures
import dataclasses
import logging
import math
from collections.abc import Callable

from numpy.random import SeedSequence

from retirecast import __version__
from retirecast.analytics.metrics import MonteCarloSummary, summarize
from retirecast.config.defaults import DEFAULT_BATCH_SIZE, DEFAULT_SIMULATION_COUNT
from retirecast.config.schema import SimulationConfig, SimulationParameters
from retirecast.core.engine import PathSimulator, SinglePathResult
from retirecast.core.rng import RandomSource, make_rng, spawn_seeds
from retirecast.core.timeline import Timeline
from retirecast.io.serialize import compute_config_hash
from retirecast.utils.exceptions import SimulationCancelled

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]
CancelCheck = Callable[[], bool]


def batch_sizes(n_trials: int, batch_size: int) -> list[int]:
    """Split ``n_trials`` into full batches plus a final partial one."""
    full, rest = divmod(n_trials, batch_size)
    sizes = [batch_size] * full
    if rest:
        sizes.append(rest)
    return sizes


def percent_complete(done: int, total: int) -> int:
    """Completed share as an integer percentage, rounding halves up."""
    if total <= 0:
        return 100
    return int(math.floor(done / total * 100 + 0.5))


def run_batch(
    params: SimulationParameters,
    n_paths: int,
    rng: RandomSource,
) -> list[SinglePathResult]:
    """Run ``n_paths`` independent projections drawing from one random source."""
    simulator = PathSimulator(params)
    return [simulator.run(rng) for _ in range(n_paths)]


def _run_seeded_batch(
    params: SimulationParameters,
    n_paths: int,
    seed: SeedSequence,
) -> list[SinglePathResult]:
    """Run a batch on its own generator.

    Top-level function so it is picklable for ProcessPoolExecutor.
    """
    return run_batch(params, n_paths, make_rng(seed))


def _check_cancel(should_cancel: CancelCheck | None, done: int, total: int) -> None:
    if should_cancel is not None and should_cancel():
        logger.warning("Monte Carlo run cancelled after %d of %d trials", done, total)
        raise SimulationCancelled(f"cancelled after {done} of {total} trials")


def run_monte_carlo(
    params: SimulationParameters,
    progress_callback: ProgressCallback | None = None,
    n_trials: int | None = None,
    *,
    sim_config: SimulationConfig | None = None,
    rng: RandomSource | None = None,
    should_cancel: CancelCheck | None = None,
) -> MonteCarloSummary:
    """Run many independent projections and summarize them.

    Trials run in batches of ``sim_config.batch_size``. After each batch the
    progress callback, if any, receives the percentage of trials completed
    and ``should_cancel`` is polled; a True answer raises
    ``SimulationCancelled``.

    Without an explicit ``rng`` every batch gets its own generator spawned
    from ``sim_config.seed``, so the result is the same whether batches run
    in-process or on ``sim_config.max_workers`` worker processes. An explicit
    ``rng`` is shared by all batches and forces in-process execution.

    Args:
        params: Household parameters, identical for every trial.
        progress_callback: Optional observer called with an int in 0-100.
        n_trials: Number of trials; overrides ``sim_config.n_trials``.
        sim_config: Execution parameters; defaults to 10,000 trials in
            batches of 1,000.
        rng: Optional random source for every draw of the run.
        should_cancel: Optional predicate polled between batches.

    Returns:
        MonteCarloSummary over all trials.

    Raises:
        pydantic.ValidationError: If ``n_trials`` is negative.
        SimulationCancelled: If ``should_cancel`` returns True between batches.
    """
    if sim_config is None:
        sim_config = SimulationConfig(
            n_trials=DEFAULT_SIMULATION_COUNT,
            batch_size=DEFAULT_BATCH_SIZE,
        )
    if n_trials is not None:
        sim_config = SimulationConfig.model_validate(
            {**sim_config.model_dump(), "n_trials": n_trials}
        )

    total = sim_config.n_trials
    sizes = batch_sizes(total, sim_config.batch_size)
    logger.info(
        "Running %d trials in %d batches (model=%s, withdrawal=%s)",
        total,
        len(sizes),
        params.simulation_model,
        params.withdrawal_model,
    )

    parallel = rng is None and sim_config.max_workers is not None and sim_config.max_workers > 1
    if parallel:
        batches = _run_parallel(params, sizes, sim_config, progress_callback, should_cancel)
    else:
        batches = _run_sequential(params, sizes, sim_config, rng, progress_callback, should_cancel)

    results = [r for batch in batches for r in batch]
    timeline = Timeline.from_ages(
        params.current_age, params.retirement_age, params.life_expectancy
    )
    summary = summarize(results, timeline.n_points)
    logger.info(
        "Success rate %.1f%% (%d depleted of %d)",
        summary.success_rate,
        summary.depletion_count,
        summary.total_simulations,
    )
    return dataclasses.replace(
        summary,
        config_hash=compute_config_hash(params, sim_config),
        engine_version=__version__,
    )


def _run_sequential(
    params: SimulationParameters,
    sizes: list[int],
    sim_config: SimulationConfig,
    rng: RandomSource | None,
    progress_callback: ProgressCallback | None,
    should_cancel: CancelCheck | None,
) -> list[list[SinglePathResult]]:
    total = sum(sizes)
    seeds = spawn_seeds(sim_config.seed, len(sizes)) if rng is None else []
    batches: list[list[SinglePathResult]] = []
    done = 0

    for i, size in enumerate(sizes):
        batch_rng = rng if rng is not None else make_rng(seeds[i])
        batches.append(run_batch(params, size, batch_rng))
        done += size
        logger.debug("Batch %d/%d complete (%d trials)", i + 1, len(sizes), done)
        if progress_callback is not None:
            progress_callback(percent_complete(done, total))
        if done < total:
            _check_cancel(should_cancel, done, total)

    return batches


def _run_parallel(
    params: SimulationParameters,
    sizes: list[int],
    sim_config: SimulationConfig,
    progress_callback: ProgressCallback | None,
    should_cancel: CancelCheck | None,
) -> list[list[SinglePathResult]]:
    total = sum(sizes)
    seeds = spawn_seeds(sim_config.seed, len(sizes))
    batches: list[list[SinglePathResult]] = [[] for _ in sizes]
    done = 0

    with concurrent.futures.ProcessPoolExecutor(max_workers=sim_config.max_workers) as executor:
        future_to_idx = {
            executor.submit(_run_seeded_batch, params, size, seed): i
            for i, (size, seed) in enumerate(zip(sizes, seeds, strict=True))
        }
        try:
            for future in concurrent.futures.as_completed(future_to_idx):
                idx = future_to_idx[future]
                batches[idx] = future.result()
                done += sizes[idx]
                logger.debug("Batch %d/%d complete (%d trials)", idx + 1, len(sizes), done)
                if progress_callback is not None:
                    progress_callback(percent_complete(done, total))
                if done < total:
                    _check_cancel(should_cancel, done, total)
        except SimulationCancelled:
            executor.shutdown(wait=False, cancel_futures=True)
            raise

    return batches
