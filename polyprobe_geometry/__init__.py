"""
Geometry Kernel
===============

Bounded Context: Pure 2-D geometry for point-in-polygon queries.

Responsibilities:
- Point arithmetic and distance
- Infinite lines (ordinary / vertical) and their intersection
- Bounded segments with box-checked intersection
- Polygon containment (crossing-number test with vertex disambiguation)
- NO I/O, NO logging, NO validation

Design Philosophy:
- Immutable data structures (frozen dataclasses)
- Absence is None, never an exception
- IEEE float64 semantics (inf/nan instead of ZeroDivisionError)

Layers (leaves first):

    point.py    -> Point
    linear.py   -> LinearEquation, OrdinaryLine, VerticalLine, Orientation
    segment.py  -> SegmentEquation
    polygon.py  -> Polygon
"""

from polyprobe_geometry.point import Point
from polyprobe_geometry.linear import LinearEquation, OrdinaryLine, VerticalLine, Orientation
from polyprobe_geometry.segment import SegmentEquation
from polyprobe_geometry.polygon import Polygon

__all__ = [
    "Point",
    "LinearEquation",
    "OrdinaryLine",
    "VerticalLine",
    "Orientation",
    "SegmentEquation",
    "Polygon",
]

__version__ = "1.0.0"
