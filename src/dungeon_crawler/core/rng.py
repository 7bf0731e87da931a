from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can roll an integer in a closed range."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Allows injecting a fixed seed for reproducible combat rolls. Exposes the
    minimal API the combat engine needs instead of Python's global RNG.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized RNG with deterministic seed=%s", self.seed)
        else:
            logger.debug("Initialized RNG with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        if a > b:
            raise ValueError(f"Empty range for randint: [{a}, {b}]")
        return self._rng.randint(a, b)
