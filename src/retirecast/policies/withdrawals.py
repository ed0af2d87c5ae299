"""Withdrawal ordering policy: taxable -> traditional -> roth."""

from __future__ import annotations

from retirecast.core.state import AccountState

WITHDRAWAL_ORDER: tuple[str, ...] = ("taxable", "traditional", "roth")

# Relative to the need; absorbs rounding left by draining every account
SHORTFALL_TOLERANCE: float = 1e-9


def withdraw(state: AccountState, amount_needed: float) -> float:
    """Withdraw from accounts in priority order.

    Each account gives ``min(balance, remaining)``, so no balance goes below
    zero. A non-positive need (for example after an RMD already covered it)
    leaves every account untouched.

    Args:
        state: Current account state (balances will be mutated).
        amount_needed: Spending still to be covered this year.

    Returns:
        The unmet need; positive means the accounts ran dry.
    """
    remaining = amount_needed

    for acct_type in WITHDRAWAL_ORDER:
        if remaining <= 0:
            break
        available: float = getattr(state, acct_type)
        if available <= 0:
            continue
        taken = min(available, remaining)
        setattr(state, acct_type, available - taken)
        remaining -= taken

    return remaining


def is_shortfall(unmet: float, amount_needed: float) -> bool:
    """True when ``withdraw`` left a real part of ``amount_needed`` uncovered."""
    return unmet > SHORTFALL_TOLERANCE * max(abs(amount_needed), 1.0)
