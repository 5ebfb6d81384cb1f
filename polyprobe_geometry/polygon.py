"""
Polygon Module
==============

Immutable ring of vertices with crossing-number containment.

Design:
- Vertices and sides are tuples built once at init
- Closing side runs from the last vertex back to the first
- No validation: degenerate rings are accepted as given
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from polyprobe_geometry.linear import LinearEquation, Orientation
from polyprobe_geometry.point import Point
from polyprobe_geometry.segment import SegmentEquation


Vertex = Union[Point, Sequence[float]]


def _as_point(vertex: Vertex) -> Point:
    if isinstance(vertex, Point):
        return vertex
    return Point.from_pair(vertex)


@dataclass(frozen=True, init=False)
class Polygon:
    """
    Immutable simple polygon (single ring, no holes).

    Attributes:
        vertices: Ring vertices in the caller's order
        sides: One SegmentEquation per consecutive vertex pair, closing side last

    Example:
        >>> square = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        >>> square.contains(Point(2, 2))
        True
        >>> square.contains(Point(5, 5))
        False
    """

    vertices: Tuple[Point, ...]
    sides: Tuple[SegmentEquation, ...]

    def __init__(self, vertices: Iterable[Vertex]):
        points = tuple(_as_point(v) for v in vertices)
        count = len(points)
        sides = tuple(
            SegmentEquation(points[i], points[(i + 1) % count])
            for i in range(count)
        )
        object.__setattr__(self, "vertices", points)
        object.__setattr__(self, "sides", sides)

    @classmethod
    def diamond(cls, center: Point, radius: float = 1.0) -> "Polygon":
        """
        Four-vertex diamond ring around a point.

        Vertices at +x, +y, -x, -y offsets of ``radius`` from ``center``.
        """
        return cls([
            center + Point(radius, 0.0),
            center + Point(0.0, radius),
            center + Point(-radius, 0.0),
            center + Point(0.0, -radius),
        ])

    def contains(self, point: Vertex) -> bool:
        """
        Check whether a point is inside or on the boundary.

        Crossing-number test along a horizontal line through the point,
        counting crossings strictly left of it. A crossing that lands on the
        point itself, or a hit of the vertical line through the point on a
        side, means the point is on the boundary.

        Args:
            point: Query point (Point or (x, y))

        Returns:
            True if inside or on the boundary, False otherwise
        """
        point = _as_point(point)

        horizontal = LinearEquation.from_point_and_orientation(point, Orientation.PARALLEL_TO_X_AXIS)
        crossings = SegmentEquation.intersect_all_special(self.sides, horizontal)
        if any(pt == point for pt in crossings):
            return True

        # horizontal sides and lower vertices never show up in crossings
        vertical = LinearEquation.from_point_and_orientation(point, Orientation.PARALLEL_TO_Y_AXIS)
        if any(pt == point for pt in SegmentEquation.intersect_all(self.sides, vertical)):
            return True

        count = sum(1 for pt in crossings if pt.x < point.x)
        return count % 2 == 1

    def intersects(self, point: Vertex) -> bool:
        """Alias of contains(), named after the geo.intersects predicate."""
        return self.contains(point)

    def to_wkt(self) -> str:
        """Render as WKT with the ring closed, e.g. ``POLYGON ((0.0 0.0, ...))``."""
        ring = list(self.vertices)
        if ring:
            ring.append(ring[0])
        return "POLYGON ((" + ", ".join(str(pt) for pt in ring) + "))"

    def __len__(self) -> int:
        return len(self.vertices)
