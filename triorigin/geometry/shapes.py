"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Fail-fast validation at construction
- Integer coordinates only (exact arithmetic downstream)
"""

import re
import numpy as np
from dataclasses import dataclass
from collections.abc import Sequence
from typing import Iterator, Tuple

from triorigin.errors import (
    CoordinateOutOfRangeError,
    DegenerateTriangleError,
    MalformedRecordError,
)

MIN_AXIS = -1000
MAX_AXIS = 1000

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def _as_int(value, name: str) -> int:
    """Coerce an int or integer string, rejecting bools and floats."""
    if isinstance(value, bool):
        raise MalformedRecordError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, str):
        token = value.strip()
        if not _INTEGER_TOKEN.fullmatch(token):
            raise MalformedRecordError(f"{name} is not an integer: {value!r}")
        return int(token)
    raise MalformedRecordError(
        f"{name} must be an integer, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class Point:
    """
    Immutable integer point on the bounded plane.

    Attributes:
        x: Horizontal coordinate in [MIN_AXIS, MAX_AXIS]
        y: Vertical coordinate in [MIN_AXIS, MAX_AXIS]
    """

    x: int
    y: int

    def __post_init__(self):
        """Validate coordinates."""
        for name in ("x", "y"):
            value = _as_int(getattr(self, name), name)
            if not MIN_AXIS <= value <= MAX_AXIS:
                raise CoordinateOutOfRangeError(
                    f"{name}={value} outside [{MIN_AXIS}, {MAX_AXIS}]"
                )
            object.__setattr__(self, name, value)

    @classmethod
    def from_tuple(cls, t: Sequence) -> "Point":
        if isinstance(t, str) or not isinstance(t, Sequence) or len(t) != 2:
            raise MalformedRecordError(f"Cannot create Point from {t!r}")
        return cls(t[0], t[1])

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class Triangle:
    """
    Immutable, non-degenerate triangle.

    The labels A, B, C are for reference only; containment does not depend
    on vertex order.

    Invariants:
        - three distinct vertices
        - non-collinear (area2 != 0)

    Raises:
        MalformedRecordError: a vertex is neither a Point nor an (x, y) pair
        DegenerateTriangleError: repeated or collinear vertices
    """

    a: Point
    b: Point
    c: Point

    def __post_init__(self):
        """Coerce (x, y) pairs to Points and reject degenerate triangles."""
        for name in ("a", "b", "c"):
            vertex = getattr(self, name)
            if not isinstance(vertex, Point):
                object.__setattr__(self, name, Point.from_tuple(vertex))

        if len({self.a, self.b, self.c}) != 3:
            raise DegenerateTriangleError(
                f"Triangle {self} has repeated vertices"
            )
        if self.area2 == 0:
            raise DegenerateTriangleError(
                f"Triangle {self} has collinear vertices"
            )

    @classmethod
    def from_points(cls, points: Sequence[Sequence[int]]) -> "Triangle":
        """Build from three (x, y) pairs."""
        if len(points) != 3:
            raise MalformedRecordError(
                f"Triangle needs 3 vertices, got {len(points)}"
            )
        return cls(*points)

    @classmethod
    def from_record(cls, values: Sequence) -> "Triangle":
        """
        Build from a flat record ``ax, ay, bx, by, cx, cy``.

        Args:
            values: Six ints or integer strings

        Raises:
            MalformedRecordError: wrong arity or non-integer token
            CoordinateOutOfRangeError: coordinate outside the plane
            DegenerateTriangleError: collinear or repeated vertices
        """
        if len(values) != 6:
            raise MalformedRecordError(
                f"Record needs 6 integers, got {len(values)}"
            )
        return cls(
            Point(values[0], values[1]),
            Point(values[2], values[3]),
            Point(values[4], values[5]),
        )

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    @property
    def area2(self) -> int:
        """
        Twice the signed area.

        Positive for counter-clockwise A->B->C, negative for clockwise,
        zero for collinear points.
        """
        a, b, c = self.a, self.b, self.c
        return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)

    def edges(self) -> Tuple[Tuple[str, Point, Point], ...]:
        """Directed edges in A->B->C winding."""
        return (
            ("AB", self.a, self.b),
            ("BC", self.b, self.c),
            ("CA", self.c, self.a),
        )

    def as_array(self) -> np.ndarray:
        """Vertices as a (3, 2) int64 array."""
        return np.array([[p.x, p.y] for p in self.vertices], dtype=np.int64)

    def __str__(self) -> str:
        return f"{self.a},{self.b},{self.c}"
