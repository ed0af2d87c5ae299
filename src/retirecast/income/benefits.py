"""Claiming-age-adjusted Social Security benefit."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from retirecast.io.yaml_loader import load_table


def load_benefit_adjustments() -> Mapping[int, float]:
    """Load the claiming age -> benefit multiplier table."""
    data: dict[str, Any] = load_table("benefit_adjustments", ("adjustments",))
    return MappingProxyType({int(k): float(v) for k, v in data["adjustments"].items()})


BENEFIT_ADJUSTMENTS: Mapping[int, float] = load_benefit_adjustments()


def adjustment_factor(claiming_age: int) -> float:
    """Benefit multiplier for a claiming age; 1.0 for ages not in the table."""
    return BENEFIT_ADJUSTMENTS.get(claiming_age, 1.0)


def social_security_benefit(base_benefit: float, claiming_age: int, current_age: int) -> float:
    """Annual benefit in today's dollars received at ``current_age``.

    Zero before the claiming age; afterwards the base benefit scaled by the
    claiming-age adjustment, unchanged in real terms every later year.
    """
    if current_age < claiming_age:
        return 0.0
    return base_benefit * adjustment_factor(claiming_age)
