"""Pydantic v2 configuration models for retirecast."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReturnAssumption(BaseModel):
    """Mean and volatility of one asset class's annual return."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mean: float = Field(description="Expected annual return (e.g. 0.07 for 7%)")
    std_dev: float = Field(ge=0, description="Annual standard deviation of returns")


class ReturnAssumptions(BaseModel):
    """Per-asset-class return assumptions for the parametric return model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stocks: ReturnAssumption
    bonds: ReturnAssumption
    cash: ReturnAssumption


class SimulationParameters(BaseModel):
    """Household inputs for a retirement projection.

    Percentages are expressed 0-100; rates (inflation, tax) are fractions.
    Age ordering is deliberately not validated: a life expectancy at or below
    the current age simply produces a zero-year projection.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    current_age: int = Field(ge=0, le=120)
    retirement_age: int = Field(ge=0, le=120)
    life_expectancy: int = Field(ge=0, le=120)

    traditional_balance: float = Field(default=0.0, ge=0, description="Tax-deferred balance")
    roth_balance: float = Field(default=0.0, ge=0, description="Roth balance")
    taxable_balance: float = Field(default=0.0, ge=0, description="Taxable brokerage balance")

    annual_contribution: float = Field(
        default=0.0, ge=0, description="Annual contribution in today's dollars"
    )
    contribution_type: Literal["traditional", "roth", "split"] = Field(
        default="split",
        description="Where pre-retirement contributions go ('split' = half each)",
    )
    annual_spending: float = Field(
        default=0.0, ge=0, description="Annual retirement spending in today's dollars"
    )

    ss_base_benefit: float = Field(
        default=0.0, ge=0, description="Annual benefit at full retirement age, today's dollars"
    )
    ss_claiming_age: int = Field(default=67, ge=0, le=120)

    stocks_percent: float = Field(default=60.0, ge=0, le=100)
    bonds_percent: float = Field(default=30.0, ge=0, le=100)
    use_glide_path: bool = Field(
        default=False, description="Derive the allocation from age instead of the static split"
    )

    inflation_rate: float = Field(default=0.03, description="Annual inflation (e.g. 0.03)")
    tax_rate: float = Field(
        default=0.0,
        ge=0,
        le=1,
        description="Flat effective tax rate (accepted for compatibility, not applied)",
    )

    include_healthcare: bool = False
    healthcare_cost_base: float = Field(
        default=0.0, ge=0, description="Annual healthcare cost in today's dollars"
    )

    simulation_model: Literal["historical", "stochastic", "parameterized"] = Field(
        default="historical",
        description="Return model: historical resampling or correlated normal draws",
    )
    custom_returns: ReturnAssumptions | None = Field(
        default=None,
        description="Caller return assumptions, used when simulation_model='parameterized'",
    )

    withdrawal_model: Literal["fixed", "percentage", "life_expectancy"] = "fixed"
    withdrawal_percent: float = Field(
        default=4.0,
        ge=0,
        le=100,
        description="Annual withdrawal percentage for the 'percentage' model",
    )

    birth_year: int | None = Field(
        default=None,
        description="Birth year for the RMD start-age rule; derived from today if omitted",
    )


class SimulationConfig(BaseModel):
    """Monte Carlo execution parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    n_trials: int = Field(default=10_000, ge=0, le=1_000_000)
    batch_size: int = Field(default=1_000, ge=1)
    seed: int = Field(default=42, ge=0)
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Process pool size; None runs every batch in-process",
    )
