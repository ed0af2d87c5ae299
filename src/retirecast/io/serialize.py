"""Serialization for parameters, summaries, and time series export."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from typing import Any

from pydantic import ValidationError

from retirecast.analytics.metrics import PERCENTILE_KEYS, MonteCarloSummary
from retirecast.config.schema import SimulationConfig, SimulationParameters
from retirecast.utils.exceptions import ConfigError


def compute_config_hash(params: SimulationParameters, sim_config: SimulationConfig) -> str:
    """Compute a deterministic SHA-256 hash of all configs.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    data = {
        "params": params.model_dump(),
        "simulation": sim_config.model_dump(),
    }
    canonical = json.dumps(data, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(params: SimulationParameters, sim_config: SimulationConfig) -> str:
    """Serialize parameters and execution config to a JSON string."""
    data = {
        "params": params.model_dump(),
        "simulation": sim_config.model_dump(),
    }
    return json.dumps(data, indent=2)


def load_config(json_str: str) -> tuple[SimulationParameters, SimulationConfig]:
    """Deserialize parameters and execution config from a JSON string.

    The ``simulation`` section is optional and falls back to defaults.

    Raises:
        ConfigError: If the text is not JSON or does not describe valid parameters.
    """
    try:
        data: dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config is not valid JSON: {exc}") from exc
    if not isinstance(data, dict) or "params" not in data:
        raise ConfigError("config must be a JSON object with a 'params' section")

    try:
        params = SimulationParameters.model_validate(data["params"])
        sim_config = SimulationConfig.model_validate(data.get("simulation", {}))
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    return params, sim_config


def summary_to_dict(summary: MonteCarloSummary) -> dict[str, Any]:
    """Plain-JSON view of a summary (arrays become lists)."""
    return {
        "total_simulations": summary.total_simulations,
        "success_count": summary.success_count,
        "success_rate": summary.success_rate,
        "final_balance_percentiles": dict(summary.final_balance_percentiles),
        "balance_percentiles": {
            key: [float(v) for v in band] for key, band in summary.balance_percentiles.items()
        },
        "mean_balances": [float(v) for v in summary.mean_balances],
        "avg_depletion_age": summary.avg_depletion_age,
        "depletion_count": summary.depletion_count,
        "config_hash": summary.config_hash,
        "engine_version": summary.engine_version,
    }


def dump_summary(summary: MonteCarloSummary) -> str:
    """Serialize a Monte Carlo summary to JSON."""
    return json.dumps(summary_to_dict(summary), indent=2)


def dump_time_series_csv(summary: MonteCarloSummary, current_age: int) -> str:
    """Export per-year balance bands as CSV.

    Args:
        summary: Monte Carlo summary.
        current_age: Age of the first (starting) snapshot.

    Returns:
        CSV string with Age, P10, P25, P50, P75, P90, Mean columns.
    """
    n_points = summary.n_points
    if n_points == 0:
        return ""

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Age", *(f"Balance_P{p}" for p in PERCENTILE_KEYS), "Balance_Mean"])

    for i in range(n_points):
        row = [str(current_age + i)]
        row.extend(f"{summary.balance_percentiles[f'p{p}'][i]:.2f}" for p in PERCENTILE_KEYS)
        row.append(f"{summary.mean_balances[i]:.2f}")
        writer.writerow(row)

    return output.getvalue()
