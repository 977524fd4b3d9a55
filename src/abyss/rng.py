from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    Injectable random source for map generation.

    Wraps a private random.Random so generation never touches global random
    state. Pass a seed for reproducible layouts; leave it as None to get a
    fresh, non-deterministic stream per instance.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def range(self, lo: int, hi: int) -> int:
        """Return a random integer N such that lo <= N < hi."""
        if hi <= lo:
            raise ValueError(f"Empty range [{lo}, {hi})")
        return self._rng.randrange(lo, hi)

    def roll_dice(self, n: int, sides: int) -> int:
        """Roll n dice with the given number of sides and return the total.

        Each die is uniform in [1, sides], so roll_dice(1, s) - 1 is uniform in
        [0, s - 1].
        """
        if n < 1 or sides < 1:
            raise ValueError(f"Cannot roll {n}d{sides}")
        return sum(self._rng.randint(1, sides) for _ in range(n))

    def state(self):
        """Return the internal PRNG state for debugging."""
        return self._rng.getstate()

    def set_state(self, state) -> None:
        """Restore the internal PRNG state."""
        self._rng.setstate(state)


__all__ = ["RandomSource"]
