"""Deterministic RNG factory and the random-source protocol used by the engine."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
from numpy.random import PCG64DXSM, Generator, SeedSequence
from numpy.typing import NDArray


class RandomSource(Protocol):
    """Capability object that supplies every random draw of a projection.

    ``numpy.random.Generator`` satisfies this protocol; tests may pass any
    object with the same three methods to pin the draws.
    """

    def random(self) -> float:
        """Uniform draw on [0, 1)."""
        ...

    def standard_normal(self, size: int) -> NDArray[np.floating[Any]]:
        """``size`` independent standard-normal draws."""
        ...

    def integers(self, low: int, high: int) -> int:
        """Uniform integer on [low, high)."""
        ...


def make_rng(seed: int | SeedSequence) -> Generator:
    """Create a deterministic numpy Generator from a seed.

    Uses PCG64DXSM for high-quality, reproducible random number generation.
    """
    return Generator(PCG64DXSM(seed))


def spawn_seeds(seed: int, n: int) -> list[SeedSequence]:
    """Derive ``n`` statistically independent child seeds from one root seed.

    Each Monte Carlo batch gets its own child, so a run's output does not
    depend on how batches are distributed across workers.
    """
    return SeedSequence(seed).spawn(n)
