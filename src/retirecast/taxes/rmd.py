"""Required Minimum Distribution (RMD) computation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from retirecast.io.yaml_loader import load_table


class RMDCalculator:
    """Compute Required Minimum Distributions from the IRS Uniform Lifetime Table.

    Ages outside the tabulated range yield no distribution rather than
    extrapolating the table.
    """

    def __init__(self) -> None:
        data: dict[str, Any] = load_table(
            "rmd_divisors",
            ("rmd_start_age", "delayed_start_year", "delayed_start_age", "divisors"),
        )
        self._start_age: int = data["rmd_start_age"]
        self._delayed_start_year: int = data["delayed_start_year"]
        self._delayed_start_age: int = data["delayed_start_age"]
        self._divisors: Mapping[int, float] = MappingProxyType(
            {int(k): float(v) for k, v in data["divisors"].items()}
        )

    @property
    def divisors(self) -> Mapping[int, float]:
        """Read-only age -> divisor table."""
        return self._divisors

    def start_age(self, birth_year: int | None = None) -> int:
        """Age when RMDs begin for someone born in ``birth_year``.

        Households turning 73 in or after 2033 start at 75; everyone else,
        including an unknown birth year, starts at 73.
        """
        if birth_year and birth_year + self._start_age >= self._delayed_start_year:
            return self._delayed_start_age
        return self._start_age

    def divisor(self, age: int) -> float:
        """Look up the RMD divisor for a given age (0.0 when not tabulated)."""
        return self._divisors.get(age, 0.0)

    def compute_rmd(self, age: int, traditional_balance: float, birth_year: int | None) -> float:
        """Compute the RMD amount for one account holder.

        Args:
            age: Current age (integer).
            traditional_balance: Current tax-deferred balance.
            birth_year: Holder's birth year, or None if unknown.

        Returns:
            ``traditional_balance / divisor(age)``, or zero before the start
            age or at an untabulated age.
        """
        if age < self.start_age(birth_year):
            return 0.0
        d = self.divisor(age)
        if d <= 0:
            return 0.0
        return traditional_balance / d


_DEFAULT_CALCULATOR: RMDCalculator | None = None


def default_rmd_calculator() -> RMDCalculator:
    """Shared calculator so the YAML table is parsed once per process."""
    global _DEFAULT_CALCULATOR
    if _DEFAULT_CALCULATOR is None:
        _DEFAULT_CALCULATOR = RMDCalculator()
    return _DEFAULT_CALCULATOR
