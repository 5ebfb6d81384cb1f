"""
Segment Equation Module
=======================

A line equation bounded by two endpoints.

Design:
- Frozen dataclass over the two endpoints
- Underlying line, length and bounding box computed once at init
- Range checks are inclusive on both ends
- Out-of-range results are None, not a nan sentinel

Intersection flavours:
- intersect(): segment/segment (both boxes) or segment/line (segment box)
- intersect_special(): segment/line with the vertex rule used for ray
  casting, so a ray through a shared vertex is counted by one side only
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from polyprobe_geometry.linear import LinearEquation
from polyprobe_geometry.point import Point


@dataclass(frozen=True)
class SegmentEquation(LinearEquation):
    """
    Immutable bounded segment between two endpoints.

    Attributes:
        endpoint1: First endpoint
        endpoint2: Second endpoint

    Derived (read-only):
        line: Unbounded line through both endpoints
        length: Euclidean length
        x_range: (low, high) x bounds
        y_range: (low, high) y bounds
    """

    endpoint1: Point
    endpoint2: Point

    def __post_init__(self):
        """Derive line, length and bounding box (object.__setattr__ for frozen)."""
        p1, p2 = self.endpoint1, self.endpoint2
        object.__setattr__(self, "_line", LinearEquation.from_two_points(p1, p2))
        object.__setattr__(self, "_length", Point.distance(p1, p2))

        if p1.x >= p2.x:
            x_range = (p2.x, p1.x)
        else:
            x_range = (p1.x, p2.x)
        if p1.y >= p2.y:
            y_range = (p2.y, p1.y)
        else:
            y_range = (p1.y, p2.y)
        object.__setattr__(self, "_x_range", x_range)
        object.__setattr__(self, "_y_range", y_range)

    @property
    def line(self) -> LinearEquation:
        return self._line

    @property
    def slope(self) -> float:
        return self._line.slope

    @property
    def bias(self) -> float:
        return self._line.bias

    @property
    def is_vertical(self) -> bool:
        return self._line.is_vertical

    @property
    def length(self) -> float:
        return self._length

    @property
    def x_range(self) -> Tuple[float, float]:
        return self._x_range

    @property
    def y_range(self) -> Tuple[float, float]:
        return self._y_range

    def in_x_range(self, value: float) -> bool:
        low, high = self._x_range
        return bool(low <= value <= high)

    def in_y_range(self, value: float) -> bool:
        low, high = self._y_range
        return bool(low <= value <= high)

    def contains_point(self, pt: Optional[Point]) -> bool:
        """Inclusive bounding-box test. None is never contained."""
        if pt is None:
            return False
        return self.in_x_range(pt.x) and self.in_y_range(pt.y)

    def coord_x_from_y(self, y: float) -> Optional[float]:
        """
        x-coordinate on the segment at ``y``.

        Returns:
            The line's x at ``y`` if it lies within x_range, else None
        """
        x = self._line.coord_x_from_y(y)
        if self.in_x_range(x):
            return x
        return None

    def coord_y_from_x(self, x: float) -> Optional[float]:
        """
        y-coordinate on the segment at ``x``.

        Returns:
            The line's y at ``x`` if it lies within y_range, else None
        """
        y = self._line.coord_y_from_x(x)
        if self.in_y_range(y):
            return y
        return None

    @staticmethod
    def intersect(segment: "SegmentEquation", other: LinearEquation) -> Optional[Point]:
        """
        Intersection of a segment with another segment or a line.

        With a segment, the point must lie in both bounding boxes; with a
        plain line, only in the segment's.

        Args:
            segment: The segment
            other: Another SegmentEquation, or an unbounded line

        Returns:
            Intersection point, or None
        """
        pt = LinearEquation.intersect(segment, other)
        if not segment.contains_point(pt):
            return None
        if isinstance(other, SegmentEquation) and not other.contains_point(pt):
            return None
        return pt

    @staticmethod
    def intersect_special(segment: "SegmentEquation", line: LinearEquation) -> Optional[Point]:
        """
        Segment/line intersection with vertex disambiguation.

        A hit exactly on an endpoint is dropped when that endpoint is not
        above the other one. Of two sides sharing a vertex on the test line,
        only the side whose other endpoint lies strictly below reports it.

        Args:
            segment: The segment (polygon side)
            line: The test line

        Returns:
            Intersection point, or None
        """
        pt = SegmentEquation.intersect(segment, line)
        if pt is None:
            return None

        if pt == segment.endpoint1:
            if pt.y <= segment.endpoint2.y:
                return None
        elif pt == segment.endpoint2:
            if pt.y <= segment.endpoint1.y:
                return None

        return pt

    @staticmethod
    def intersect_all(segments: Iterable["SegmentEquation"], line: LinearEquation) -> List[Point]:
        """Non-None intersect() results, in input order, duplicates kept."""
        points = []
        for segment in segments:
            pt = SegmentEquation.intersect(segment, line)
            if pt is not None:
                points.append(pt)
        return points

    @staticmethod
    def intersect_all_special(segments: Iterable["SegmentEquation"], line: LinearEquation) -> List[Point]:
        """Non-None intersect_special() results, in input order, duplicates kept."""
        points = []
        for segment in segments:
            pt = SegmentEquation.intersect_special(segment, line)
            if pt is not None:
                points.append(pt)
        return points
