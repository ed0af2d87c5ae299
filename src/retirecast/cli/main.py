"""CLI entry point for retirecast."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from retirecast.config.defaults import (
    default_params,
    default_sim_config,
    early_retiree_params,
    near_retiree_params,
)
from retirecast.core.monte_carlo import run_monte_carlo
from retirecast.io.serialize import dump_summary, dump_time_series_csv, load_config
from retirecast.utils.exceptions import ConfigError

TEMPLATES = {
    "default": default_params,
    "early": early_retiree_params,
    "near": near_retiree_params,
}


@click.group()
@click.version_option(package_name="retirecast")
@click.option("--verbose", "-v", is_flag=True, help="Log batch progress to stderr.")
def cli(verbose: bool) -> None:
    """retirecast: Monte Carlo retirement projection engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON config file. Uses a template if not provided.",
)
@click.option(
    "--template",
    type=click.Choice(sorted(TEMPLATES)),
    default="default",
    show_default=True,
    help="Built-in household used when no config file is given.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the summary JSON.",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write per-year balance bands as CSV.",
)
@click.option(
    "--trials", default=None, type=click.IntRange(min=0), help="Number of Monte Carlo trials."
)
@click.option("--seed", default=None, type=int, help="Random seed.")
@click.option(
    "--workers",
    default=None,
    type=click.IntRange(min=1),
    help="Worker processes (default: in-process).",
)
def run(
    config_path: Path | None,
    template: str,
    output_path: Path | None,
    csv_path: Path | None,
    trials: int | None,
    seed: int | None,
    workers: int | None,
) -> None:
    """Run a Monte Carlo projection."""
    if config_path is not None:
        try:
            params, sim_config = load_config(config_path.read_text())
        except ConfigError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc
    else:
        params = TEMPLATES[template]()
        sim_config = default_sim_config()

    # CLI overrides
    if trials is not None:
        sim_config = sim_config.model_copy(update={"n_trials": trials})
    if seed is not None:
        sim_config = sim_config.model_copy(update={"seed": seed})
    if workers is not None:
        sim_config = sim_config.model_copy(update={"max_workers": workers})

    click.echo(f"Running simulation: {sim_config.n_trials} trials, seed={sim_config.seed}")
    click.echo(
        f"Plan: age {params.current_age} → {params.retirement_age} → {params.life_expectancy}"
    )

    with click.progressbar(length=100, label="Simulating") as bar:
        reported = 0

        def on_progress(pct: int) -> None:
            nonlocal reported
            bar.update(pct - reported)
            reported = pct

        summary = run_monte_carlo(params, on_progress, sim_config=sim_config)

    click.echo(f"\nSuccess rate: {summary.success_rate:.1f}%")
    click.echo(f"Depleted trials: {summary.depletion_count}")
    if summary.avg_depletion_age is not None:
        click.echo(f"Average depletion age: {summary.avg_depletion_age:.1f}")
    click.echo("Final balance percentiles:")
    for key, val in summary.final_balance_percentiles.items():
        click.echo(f"  {key}: ${val:,.0f}")

    if output_path is not None:
        output_path.write_text(dump_summary(summary))
        click.echo(f"\nResults written to {output_path}")
    if csv_path is not None:
        csv_path.write_text(dump_time_series_csv(summary, params.current_age))
        click.echo(f"Balance bands written to {csv_path}")


if __name__ == "__main__":
    cli()
