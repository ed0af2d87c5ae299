"""Default configuration values for retirecast."""

from __future__ import annotations

from retirecast.config.schema import (
    ReturnAssumption,
    ReturnAssumptions,
    SimulationConfig,
    SimulationParameters,
)

DEFAULT_SIMULATION_COUNT: int = 10_000
DEFAULT_BATCH_SIZE: int = 1_000

# Long-run nominal return assumptions for the parametric model
DEFAULT_RETURNS: ReturnAssumptions = ReturnAssumptions(
    stocks=ReturnAssumption(mean=0.10, std_dev=0.17),
    bonds=ReturnAssumption(mean=0.05, std_dev=0.05),
    cash=ReturnAssumption(mean=0.03, std_dev=0.01),
)

# Only the stocks/bonds coefficient enters the shock model; cash draws are independent.
STOCKS_BONDS_CORRELATION: float = 0.2

# Healthcare costs grow this much faster than general inflation
HEALTHCARE_EXCESS_INFLATION: float = 0.02

# Used by the percentage model when withdrawal_percent is zero
DEFAULT_WITHDRAWAL_PERCENT: float = 4.0


def default_params() -> SimulationParameters:
    """Default household: 45-year-old, retiring at 65, horizon to 90."""
    return SimulationParameters(
        current_age=45,
        retirement_age=65,
        life_expectancy=90,
        traditional_balance=250_000,
        roth_balance=60_000,
        taxable_balance=40_000,
        annual_contribution=20_000,
        contribution_type="split",
        annual_spending=60_000,
        ss_base_benefit=24_000,
        ss_claiming_age=67,
        stocks_percent=60,
        bonds_percent=30,
        inflation_rate=0.03,
        include_healthcare=True,
        healthcare_cost_base=6_000,
    )


def default_sim_config() -> SimulationConfig:
    """Default simulation config: 10,000 trials in batches of 1,000, seed 42."""
    return SimulationConfig(
        n_trials=DEFAULT_SIMULATION_COUNT,
        batch_size=DEFAULT_BATCH_SIZE,
        seed=42,
    )


# --- Quick Start Templates ---


def early_retiree_params() -> SimulationParameters:
    """Early retirement template: retire at 55 on a glide path, spend a fixed percentage."""
    return SimulationParameters(
        current_age=40,
        retirement_age=55,
        life_expectancy=92,
        traditional_balance=400_000,
        roth_balance=150_000,
        taxable_balance=200_000,
        annual_contribution=45_000,
        contribution_type="traditional",
        annual_spending=70_000,
        ss_base_benefit=20_000,
        ss_claiming_age=70,
        use_glide_path=True,
        inflation_rate=0.03,
        simulation_model="stochastic",
        withdrawal_model="percentage",
        withdrawal_percent=4.0,
    )


def near_retiree_params() -> SimulationParameters:
    """Near-retiree template: large tax-deferred balance, healthcare tracked."""
    return SimulationParameters(
        current_age=62,
        retirement_age=65,
        life_expectancy=95,
        traditional_balance=900_000,
        roth_balance=100_000,
        taxable_balance=150_000,
        annual_contribution=25_000,
        contribution_type="traditional",
        annual_spending=65_000,
        ss_base_benefit=30_000,
        ss_claiming_age=67,
        stocks_percent=50,
        bonds_percent=40,
        inflation_rate=0.03,
        include_healthcare=True,
        healthcare_cost_base=8_000,
        withdrawal_model="life_expectancy",
    )
