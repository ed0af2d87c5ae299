"""Contribution policy: route annual contributions during accumulation."""

from __future__ import annotations

from retirecast.core.state import AccountState


def apply_contribution(
    state: AccountState,
    annual_contribution: float,
    contribution_type: str,
) -> None:
    """Add one year's inflation-adjusted contribution to the state.

    Args:
        state: Current account state (balances will be mutated).
        annual_contribution: Base contribution in today's dollars.
        contribution_type: ``"traditional"``, ``"roth"``, or ``"split"``
            (half to each).
    """
    contribution = annual_contribution * state.cumulative_inflation
    if contribution_type == "traditional":
        state.traditional += contribution
    elif contribution_type == "roth":
        state.roth += contribution
    else:
        state.traditional += contribution / 2.0
        state.roth += contribution / 2.0
