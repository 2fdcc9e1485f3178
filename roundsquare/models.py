"""Lightweight data models used across the field."""

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Point:
    """
    An immutable integer position on the page or inside a field.

    Attributes
    ----------
    x : int
        Horizontal coordinate, rounded at construction.
    y : int
        Vertical coordinate, rounded at construction.
    """
    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", round_half_up(self.x))
        object.__setattr__(self, "y", round_half_up(self.y))
