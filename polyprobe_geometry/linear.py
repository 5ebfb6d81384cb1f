"""
Linear Equation Module
======================

Infinite lines as a tagged variant.

Design:
- OrdinaryLine: y = slope * x + intercept
- VerticalLine: x = const (no slope stored, reports +inf)
- Both immutable (frozen dataclass), thread-safe
- All arithmetic under numpy.errstate: division by zero yields inf/nan,
  matching IEEE behaviour instead of raising

The legacy ``bias`` accessor is kept on every variant: intercept for an
ordinary line, constant x for a vertical one.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from polyprobe_geometry.point import Point


IEEE = dict(divide="ignore", invalid="ignore", over="ignore")


class Orientation(str, Enum):
    """Orientation of an axis-parallel line built through a single point."""

    PARALLEL_TO_X_AXIS = "parallel_to_x_axis"
    PARALLEL_TO_Y_AXIS = "parallel_to_y_axis"


class LinearEquation(ABC):
    """
    Base of the line variants.

    Subclasses expose ``slope``, ``bias``, ``is_vertical`` and ``line`` (the
    unbounded line the equation lies on). Use the factories rather than
    constructing variants by hand when the orientation is not known upfront.
    """

    @property
    @abstractmethod
    def line(self) -> "LinearEquation":
        """The unbounded line (self for OrdinaryLine/VerticalLine)."""

    @abstractmethod
    def coord_x_from_y(self, y: float):
        """x-coordinate of the line at ``y``."""

    @abstractmethod
    def coord_y_from_x(self, x: float):
        """y-coordinate of the line at ``x``."""

    @staticmethod
    def from_two_points(p1: Point, p2: Point) -> "LinearEquation":
        """
        Line through two points.

        The slope is (y1 - y2) / (x1 - x2). Equal x-coordinates give an
        infinite slope and therefore a VerticalLine. Coincident points give
        a nan slope; no validation is done.

        Args:
            p1: First point
            p2: Second point

        Returns:
            OrdinaryLine or VerticalLine
        """
        with np.errstate(**IEEE):
            slope = (p1.y - p2.y) / (p1.x - p2.x)
            if np.isinf(slope):
                return VerticalLine(p1.x)
            return OrdinaryLine(slope, p1.y - slope * p1.x)

    @staticmethod
    def from_point_and_orientation(p: Point, orientation: Orientation) -> "LinearEquation":
        """
        Axis-parallel line through a point.

        PARALLEL_TO_X_AXIS gives the horizontal line y = p.y; any other
        orientation gives the vertical line x = p.x.
        """
        if orientation == Orientation.PARALLEL_TO_X_AXIS:
            return OrdinaryLine(0.0, p.y)
        return VerticalLine(p.x)

    @staticmethod
    def intersect(eq1: "LinearEquation", eq2: "LinearEquation") -> Optional[Point]:
        """
        Intersection point of two lines.

        Segments passed here are treated as their unbounded lines. Lines with
        equal slopes (parallel, identical, or both vertical) have no
        intersection.

        Args:
            eq1: First line
            eq2: Second line

        Returns:
            Intersection point, or None
        """
        l1, l2 = eq1.line, eq2.line
        if l1.slope == l2.slope:
            return None

        if isinstance(l1, VerticalLine):
            return Point(l1.x, l2.coord_y_from_x(l1.x))

        if isinstance(l2, VerticalLine):
            return Point(l2.x, l1.coord_y_from_x(l2.x))

        with np.errstate(**IEEE):
            x = (l2.intercept - l1.intercept) / (l1.slope - l2.slope)
        return Point(x, l1.coord_y_from_x(x))


@dataclass(frozen=True)
class OrdinaryLine(LinearEquation):
    """
    Non-vertical line y = slope * x + intercept.

    Attributes:
        slope: Finite slope (nan for a line built from coincident points)
        intercept: y-intercept
    """

    slope: float
    intercept: float

    def __post_init__(self):
        object.__setattr__(self, "slope", np.float64(self.slope))
        object.__setattr__(self, "intercept", np.float64(self.intercept))

    @property
    def line(self) -> "OrdinaryLine":
        return self

    @property
    def bias(self) -> float:
        return self.intercept

    @property
    def is_vertical(self) -> bool:
        return False

    def coord_x_from_y(self, y: float) -> float:
        # horizontal lines give +-inf or nan here
        with np.errstate(**IEEE):
            return (np.float64(y) - self.intercept) / self.slope

    def coord_y_from_x(self, x: float) -> float:
        with np.errstate(**IEEE):
            return self.slope * np.float64(x) + self.intercept


@dataclass(frozen=True)
class VerticalLine(LinearEquation):
    """
    Vertical line x = const.

    Attributes:
        x: The line's constant x-coordinate
    """

    x: float

    def __post_init__(self):
        object.__setattr__(self, "x", np.float64(self.x))

    @property
    def line(self) -> "VerticalLine":
        return self

    @property
    def slope(self) -> float:
        """Always +inf."""
        return math.inf

    @property
    def bias(self) -> float:
        return self.x

    @property
    def is_vertical(self) -> bool:
        return True

    def coord_x_from_y(self, y: float) -> float:
        return self.x

    def coord_y_from_x(self, x: float) -> float:
        """Meaningless for a vertical line: returns the +inf slope."""
        return self.slope
