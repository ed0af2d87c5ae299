"""Single-path simulation engine: one household, one stochastic future."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from retirecast.config.defaults import DEFAULT_WITHDRAWAL_PERCENT, HEALTHCARE_EXCESS_INFLATION
from retirecast.config.schema import SimulationParameters
from retirecast.core.rng import RandomSource
from retirecast.core.state import AccountState
from retirecast.core.timeline import Timeline
from retirecast.income.benefits import social_security_benefit
from retirecast.models.returns.base import ReturnModel
from retirecast.models.returns.bootstrap import HistoricalResampleReturns
from retirecast.models.returns.correlated import CorrelatedNormalReturns
from retirecast.policies.allocation import resolve_allocation
from retirecast.policies.contributions import apply_contribution
from retirecast.policies.spending.base import SpendingPolicy
from retirecast.policies.spending.constant_real import ConstantRealSpending
from retirecast.policies.spending.life_expectancy import LifeExpectancySpending
from retirecast.policies.spending.percent_of_portfolio import PercentOfPortfolioSpending
from retirecast.policies.withdrawals import is_shortfall, withdraw
from retirecast.taxes.rmd import RMDCalculator, default_rmd_calculator


@dataclass(frozen=True)
class SinglePathResult:
    """Output of one projected path.

    ``yearly_balances`` always holds ``n_years + 1`` entries: the starting
    total followed by one post-year total per simulated year, zero-padded
    after a depletion.
    """

    success: bool
    final_balance: float
    yearly_balances: tuple[float, ...]
    depleted_at_age: int | None
    final_traditional: float
    final_roth: float
    final_taxable: float


@dataclass(frozen=True, slots=True)
class YearCompleted:
    """The year's spending need was met; ``total`` is the post-year balance."""

    total: float


@dataclass(frozen=True, slots=True)
class YearDepleted:
    """The accounts could not cover the year lived at ``age``."""

    age: int


YearOutcome = YearCompleted | YearDepleted


def build_return_model(params: SimulationParameters) -> ReturnModel:
    """Pick the return generator for a parameter set.

    Only ``"historical"`` resamples; every other selector draws parametric
    returns, with the caller's assumptions used only for ``"parameterized"``.
    """
    if params.simulation_model == "historical":
        return HistoricalResampleReturns()
    custom = params.custom_returns if params.simulation_model == "parameterized" else None
    return CorrelatedNormalReturns(custom)


def build_spending_policy(params: SimulationParameters) -> SpendingPolicy:
    """Instantiate the spending policy selected by ``withdrawal_model``."""
    if params.withdrawal_model == "percentage":
        return PercentOfPortfolioSpending(params.withdrawal_percent or DEFAULT_WITHDRAWAL_PERCENT)
    if params.withdrawal_model == "life_expectancy":
        return LifeExpectancySpending(params.life_expectancy)
    return ConstantRealSpending(params.annual_spending)


def resolve_birth_year(params: SimulationParameters, today: datetime.date | None = None) -> int:
    """Birth year used for the RMD start-age rule."""
    if params.birth_year is not None:
        return params.birth_year
    if today is None:
        today = datetime.date.today()
    return today.year - params.current_age


class PathSimulator:
    """Advance one household's accounts from current age to life expectancy.

    The simulator holds only immutable, per-parameter-set collaborators, so a
    single instance can run any number of independent paths; all per-path
    mutation lives in the ``AccountState`` created by ``run``.
    """

    def __init__(
        self,
        params: SimulationParameters,
        rmd_calculator: RMDCalculator | None = None,
    ) -> None:
        self.params = params
        self.timeline = Timeline.from_ages(
            params.current_age,
            params.retirement_age,
            params.life_expectancy,
        )
        self._returns = build_return_model(params)
        self._spending = build_spending_policy(params)
        self._rmd = rmd_calculator if rmd_calculator is not None else default_rmd_calculator()
        self._birth_year = resolve_birth_year(params)

    def advance_year(self, state: AccountState, year: int, rng: RandomSource) -> YearOutcome:
        """Simulate one year: growth first, then contribution or withdrawal."""
        p = self.params
        age = self.timeline.age_at(year)

        state.cumulative_inflation *= 1.0 + p.inflation_rate
        if p.include_healthcare:
            state.healthcare_cost *= 1.0 + p.inflation_rate + HEALTHCARE_EXCESS_INFLATION

        allocation = resolve_allocation(
            age,
            p.retirement_age,
            p.stocks_percent,
            p.bonds_percent,
            p.use_glide_path,
        )
        returns = self._returns.draw(rng)
        state.apply_return(allocation.blend(returns.stocks, returns.bonds, returns.cash))

        if self.timeline.is_retired(age):
            need = self._spending.compute(state, age)
            if p.include_healthcare:
                need += state.healthcare_cost

            benefit = (
                social_security_benefit(p.ss_base_benefit, p.ss_claiming_age, age)
                * state.cumulative_inflation
            )
            need = max(0.0, need - benefit)

            # The RMD leaves the traditional account even when it exceeds the need;
            # the excess is not reinvested.
            rmd = self._rmd.compute_rmd(age, state.traditional, self._birth_year)
            if rmd > 0:
                state.traditional -= rmd
                need -= rmd

            shortfall = withdraw(state, need)
            if is_shortfall(shortfall, need):
                return YearDepleted(age=age)
        else:
            apply_contribution(state, p.annual_contribution, p.contribution_type)

        return YearCompleted(total=max(state.total, 0.0))

    def run(self, rng: RandomSource) -> SinglePathResult:
        """Project one path, stopping at the first depleted year."""
        state = AccountState.initialize(self.params)
        n_years = self.timeline.n_years
        balances = [state.total]

        for year in range(1, n_years + 1):
            outcome = self.advance_year(state, year, rng)
            if isinstance(outcome, YearDepleted):
                balances.extend([0.0] * (n_years - year + 1))
                return SinglePathResult(
                    success=False,
                    final_balance=0.0,
                    yearly_balances=tuple(balances),
                    depleted_at_age=outcome.age,
                    final_traditional=0.0,
                    final_roth=0.0,
                    final_taxable=0.0,
                )
            balances.append(outcome.total)

        return SinglePathResult(
            success=True,
            final_balance=state.total,
            yearly_balances=tuple(balances),
            depleted_at_age=None,
            final_traditional=state.traditional,
            final_roth=state.roth,
            final_taxable=state.taxable,
        )


def simulate_path(params: SimulationParameters, rng: RandomSource) -> SinglePathResult:
    """Run a single projection.

    Args:
        params: Household parameters.
        rng: Source of every random draw in the path.

    Returns:
        SinglePathResult, possibly depleted; never raises for odd inputs.
    """
    return PathSimulator(params).run(rng)
