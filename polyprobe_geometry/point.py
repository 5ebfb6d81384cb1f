"""
Point Module
============

Immutable 2-D coordinate pair.

Design:
- Frozen dataclass (value object, no identity)
- Coordinates stored as numpy.float64 so IEEE rules apply downstream
  (x / 0.0 is inf or nan, never ZeroDivisionError)
- Exact equality, no epsilon
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    """
    Immutable 2-D point.

    Attributes:
        x: x-coordinate (float64)
        y: y-coordinate (float64)

    Example:
        >>> Point(1, 2) + Point(3, 4)
        Point(x=4.0, y=6.0)
        >>> Point.distance(Point(0, 0), Point(3, 4))
        5.0
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float64 (using object.__setattr__ for frozen)."""
        object.__setattr__(self, "x", np.float64(self.x))
        object.__setattr__(self, "y", np.float64(self.y))

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Point":
        """Build a point from any (x, y) sequence."""
        x, y = pair
        return cls(x, y)

    def add(self, other: "Point") -> "Point":
        """Component-wise sum."""
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        """Component-wise difference."""
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.subtract(other)

    @staticmethod
    def distance(a: "Point", b: "Point") -> float:
        """Euclidean distance between two points."""
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2))

    def to_wkt(self) -> str:
        """Render as a WKT point, e.g. ``POINT (1.0 2.0)``."""
        return f"POINT ({self})"

    def __repr__(self) -> str:
        return f"Point(x={float(self.x)!r}, y={float(self.y)!r})"

    def __str__(self) -> str:
        """Coordinates in WKT order: ``"x y"``."""
        return f"{float(self.x)!r} {float(self.y)!r}"
