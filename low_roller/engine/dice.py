"""
Low Roller - Dice

The die source is injected into every component that needs randomness so
a seeded or scripted source can stand in during tests and simulations.
"""

import random
from typing import Protocol

from low_roller.engine.errors import ConfigurationError


class DieSource(Protocol):
    """Anything that can roll a single die."""

    def roll(self, face_count: int) -> int:
        """Return a uniformly distributed integer in [1, face_count]."""
        ...


class RandomDieSource:
    """
    Die source backed by its own ``random.Random``.

    Args:
        seed: Optional seed; seeded sources replay the same sequence.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)

    def roll(self, face_count: int) -> int:
        if face_count < 1:
            raise ConfigurationError(f"Cannot roll a die with {face_count} faces.")
        return self.rng.randint(1, face_count)
