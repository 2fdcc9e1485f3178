"""Random integers and colors for shape parameters."""

from __future__ import annotations

import random

from .constants import MAX_COLOR
from .models import round_half_up


class RandomGenerator:
    """
    Produces bounded random integers and random hex colors.

    Pass ``seed`` (or a ready ``random.Random``) for reproducible sequences;
    otherwise a fresh, OS-seeded generator is used.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def rand_int(self, min_value: int, max_value: int) -> int:
        """
        Return an int ranged from min_value to max_value, both inclusive.

        The draw is ``round(uniform * (max - min) + min)``, so the two end
        values are half as likely as interior ones.
        """
        return round_half_up(self.rng.random() * (max_value - min_value) + min_value)

    def random_color(self) -> str:
        """Return a ``#rrggbb`` color string."""
        value = int(self.rng.random() * MAX_COLOR)
        return f"#{value:06x}"
