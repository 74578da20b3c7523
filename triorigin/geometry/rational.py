"""
Exact Rational Lines
====================

Slope/intercept form of the line through two integer points, computed with
``fractions.Fraction`` so no comparison is ever made against a rounded value.

Vertical lines have no slope. ``line_through`` returns a ``VerticalLine``
for them instead of dividing by zero; callers branch on the type.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Optional, Union

from triorigin.errors import DegenerateTriangleError
from triorigin.geometry.shapes import Point, Triangle


def ratio(p: int, q: int) -> Fraction:
    """
    Exact p/q.

    Raises:
        ValueError: if q == 0 (check for verticality before dividing)
    """
    if q == 0:
        raise ValueError(f"ratio({p}, {q}) is undefined: zero denominator")
    return Fraction(p, q)


@dataclass(frozen=True)
class Line:
    """Non-vertical line y = slope * x + intercept."""

    slope: Fraction
    intercept: Fraction

    def y_at(self, x) -> Fraction:
        return self.slope * x + self.intercept

    def x_at(self, y) -> Optional[Fraction]:
        """
        x where the line reaches height y.

        Returns:
            None for a horizontal line (never reaches y, or x is not unique)
        """
        if self.slope == 0:
            return None
        return (Fraction(y) - self.intercept) / self.slope

    def __str__(self) -> str:
        return f"y = {self.slope}x + {self.intercept}"


@dataclass(frozen=True)
class VerticalLine:
    """Line x = constant; has no slope."""

    x: int

    def y_at(self, x) -> Optional[Fraction]:
        return None

    def x_at(self, y) -> Fraction:
        return Fraction(self.x)

    def __str__(self) -> str:
        return f"x = {self.x}"


def line_through(p1: Point, p2: Point) -> Union[Line, VerticalLine]:
    """
    Infinite line through two points.

    Returns:
        VerticalLine(x=p1.x) when p1.x == p2.x, otherwise Line(slope, intercept)

    Raises:
        DegenerateTriangleError: p1 == p2
    """
    if p1 == p2:
        raise DegenerateTriangleError(f"No unique line through {p1} and {p2}")
    if p1.x == p2.x:
        return VerticalLine(x=p1.x)

    slope = ratio(p2.y - p1.y, p2.x - p1.x)
    intercept = p1.y - slope * p1.x
    return Line(slope=slope, intercept=intercept)


def axis_crossings(triangle: Triangle) -> Dict[str, Optional[Fraction]]:
    """
    x at which each edge's infinite line crosses y = 0.

    A horizontal edge maps to None. Used for trace diagnostics.
    """
    return {
        label: line_through(p1, p2).x_at(0)
        for label, p1, p2 in triangle.edges()
    }
