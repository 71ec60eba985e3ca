from __future__ import annotations

import random
import time


class RandomSource:
    """
    Seeded uniform integer generator.

    Each instance owns its own generator, so two sources built with the same
    seed produce the same sequence of draws.

    Attributes:
        seed: The seed the generator was built with.
    """

    def __init__(self, seed: int | str | None = None):
        if seed is None:
            # only hosts should rely on this, the solver always gets an explicit source
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, lo: int, hi: int) -> int:
        """
        Draw a uniform integer in [lo, hi], both bounds inclusive.

        Raises:
            ValueError: If lo is greater than hi.
        """
        if lo > hi:
            raise ValueError(f"Empty range: lo={lo} is greater than hi={hi}.")
        return self._rng.randint(lo, hi)

    def choice(self, items):
        """Pick one element of a non-empty sequence uniformly."""
        return items[self.next_int(0, len(items) - 1)]

    def __repr__(self):
        return f"RandomSource(seed={self.seed!r})"


def derive_seed(seed: int | str, label: str) -> str:
    """
    Seed for a second, independent stream tied to `seed` (e.g. the solver's
    draws next to the secret's draws).
    """
    return f"{seed}:{label}"
