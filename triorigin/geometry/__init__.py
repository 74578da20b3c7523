"""
Geometry Layer
==============

Bounded Context: Pure geometry and the origin-containment decision.

Responsibilities:
- Shape representation (immutable, validated)
- Exact rational lines (slope/intercept, vertical sentinel)
- Cross-product half-plane test
- NO state, NO counting, NO logging
"""

from triorigin.geometry.shapes import MAX_AXIS, MIN_AXIS, ORIGIN, Point, Triangle
from triorigin.geometry.rational import (
    Line,
    VerticalLine,
    axis_crossings,
    line_through,
    ratio,
)
from triorigin.geometry.detector import (
    ContainmentDetector,
    ContainmentReason,
    ContainmentResult,
)

__all__ = [
    "MIN_AXIS",
    "MAX_AXIS",
    "ORIGIN",
    "Point",
    "Triangle",
    "Line",
    "VerticalLine",
    "axis_crossings",
    "line_through",
    "ratio",
    "ContainmentDetector",
    "ContainmentReason",
    "ContainmentResult",
]
