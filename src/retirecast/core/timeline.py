"""Annual timeline for simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Timeline:
    """Yearly time grid derived from plan ages.

    Year ``y`` (1-based) is lived at age ``current_age + y``; year 0 is the
    starting snapshot.

    Attributes:
        current_age: Starting age in years.
        retirement_age: Age from which spending is drawn.
        life_expectancy: Final simulated age.
        n_years: Number of simulated years (never negative).
    """

    current_age: int
    retirement_age: int
    life_expectancy: int
    n_years: int

    @classmethod
    def from_ages(cls, current_age: int, retirement_age: int, life_expectancy: int) -> Timeline:
        """Create a Timeline from age parameters."""
        return cls(
            current_age=current_age,
            retirement_age=retirement_age,
            life_expectancy=life_expectancy,
            n_years=max(life_expectancy - current_age, 0),
        )

    @property
    def n_points(self) -> int:
        """Length of a balance sequence, including the starting snapshot."""
        return self.n_years + 1

    def age_at(self, year: int) -> int:
        """Return the age lived during simulated year ``year``."""
        return self.current_age + year

    def is_retired(self, age: int) -> bool:
        """Check whether spending is drawn at a given age."""
        return age >= self.retirement_age

    def remaining_years(self, age: int) -> int:
        """Years left until life expectancy (may be zero or negative)."""
        return self.life_expectancy - age
