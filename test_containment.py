"""
Test Origin Containment (Geometry Layer)
========================================

Shapes, exact rational lines and the containment detector.

Usage:
    pytest test_containment.py
    python test_containment.py
"""

import itertools
from fractions import Fraction

import numpy as np
import pytest

from triorigin import (
    ContainmentDetector,
    ContainmentReason,
    CoordinateOutOfRangeError,
    DegenerateTriangleError,
    MalformedRecordError,
    Point,
    Triangle,
)
from triorigin.geometry import Line, VerticalLine, axis_crossings, line_through, ratio


EXAMPLE_A = [-340, 495, -153, -910, 835, -947]
EXAMPLE_B = [-175, 41, -421, -714, 574, -645]


def _random_triangles(rng, low, high, n):
    """Non-degenerate random triangles with coordinates in [low, high]."""
    triangles = []
    for row in rng.integers(low, high + 1, size=(n, 3, 2)):
        try:
            triangles.append(Triangle.from_points(row.tolist()))
        except DegenerateTriangleError:
            continue
    return triangles


# ========== Shapes ==========

def test_point_validation():
    assert Point(1000, -1000) == Point.from_tuple((1000, -1000))
    assert Point("12", " -7 ") == Point(12, -7)

    with pytest.raises(CoordinateOutOfRangeError):
        Point(1001, 0)
    with pytest.raises(CoordinateOutOfRangeError):
        Point(0, -1001)
    with pytest.raises(MalformedRecordError):
        Point(True, 0)
    with pytest.raises(MalformedRecordError):
        Point(1.5, 0)
    with pytest.raises(MalformedRecordError):
        Point("x", 0)
    with pytest.raises(MalformedRecordError):
        Point.from_tuple((1, 2, 3))


def test_triangle_from_record():
    triangle = Triangle.from_record(EXAMPLE_A)
    assert triangle.a == Point(-340, 495)
    assert triangle.c == Point(835, -947)
    assert [label for label, _, _ in triangle.edges()] == ["AB", "BC", "CA"]
    assert triangle.as_array().shape == (3, 2)

    with pytest.raises(MalformedRecordError):
        Triangle.from_record([1, 2, 3])
    with pytest.raises(MalformedRecordError):
        Triangle.from_record(["1", "2", "3", "4", "5", "six"])
    with pytest.raises(CoordinateOutOfRangeError):
        Triangle.from_record([0, 1, 2000, 0, 1, 1])


def test_integer_tokens_are_plain_ascii():
    assert Triangle.from_record(["+5", "-1", "0", "7", " -3 ", "-2"]).a == Point(5, -1)

    for token in ("-3_4_0", "٣", "1e2", "0x10", "", "--5"):
        with pytest.raises(MalformedRecordError):
            Triangle.from_record([token, "495", "-153", "-910", "835", "-947"])


def test_triangle_from_pairs():
    triangle = Triangle((-340, 495), (-153, -910), (835, -947))
    assert triangle == Triangle.from_record(EXAMPLE_A)
    assert isinstance(triangle.b, Point)
    assert ContainmentDetector.contains_origin(triangle)

    with pytest.raises(MalformedRecordError):
        Triangle((1, 2), (3, 4), "xy")
    with pytest.raises(MalformedRecordError):
        Triangle((1, 2), (3, 4), 5)
    with pytest.raises(CoordinateOutOfRangeError):
        Triangle((1, 2), (3, 4), (5000, 0))
    with pytest.raises(DegenerateTriangleError):
        Triangle((0, 0), (1, 1), [2, 2])


def test_degenerate_rejection():
    with pytest.raises(DegenerateTriangleError):
        Triangle.from_points([(0, 0), (1, 1), (2, 2)])
    with pytest.raises(DegenerateTriangleError):
        Triangle.from_points([(3, 4), (3, 4), (5, 6)])
    with pytest.raises(DegenerateTriangleError):
        Triangle.from_record([-5, 7, 0, 7, 900, 7])


# ========== Rational Lines ==========

def test_ratio_is_exact():
    assert ratio(1, 3) + ratio(2, 3) == 1
    assert ratio(-4, 6) == Fraction(-2, 3)
    with pytest.raises(ValueError):
        ratio(5, 0)


def test_line_through():
    line = line_through(Point(0, 1), Point(2, 2))
    assert isinstance(line, Line)
    assert line.slope == Fraction(1, 2)
    assert line.intercept == 1
    assert line.x_at(0) == -2
    assert line.y_at(4) == 3

    vertical = line_through(Point(7, -3), Point(7, 9))
    assert vertical == VerticalLine(x=7)
    assert vertical.x_at(0) == 7
    assert vertical.y_at(7) is None

    horizontal = line_through(Point(-2, 3), Point(4, 3))
    assert horizontal.slope == 0
    assert horizontal.x_at(0) is None

    with pytest.raises(DegenerateTriangleError):
        line_through(Point(1, 1), Point(1, 1))


def test_axis_crossings():
    crossings = axis_crossings(Triangle.from_record([-2, 0, 2, 0, 0, 5]))
    assert crossings == {"AB": None, "BC": 2, "CA": -2}

    crossings = axis_crossings(Triangle.from_record([5, -5, 5, 5, 10, 0]))
    assert crossings["AB"] == 5


# ========== Detector ==========

def test_known_examples():
    a = ContainmentDetector.classify(Triangle.from_record(EXAMPLE_A))
    assert a.contains
    assert a.reason == ContainmentReason.INTERIOR
    assert a.cross_products == (385135, 904741, 91345)

    b = ContainmentDetector.classify(Triangle.from_record(EXAMPLE_B))
    assert not b.contains
    assert b.reason == ContainmentReason.OUTSIDE


def test_vertex_at_origin():
    for record in ([0, 0, 5, 1, 1, 5], [3, -4, 0, 0, -1000, 1000], [7, 7, 8, 9, 0, 0]):
        result = ContainmentDetector.classify(Triangle.from_record(record))
        assert result.contains
        assert result.reason == ContainmentReason.VERTEX_AT_ORIGIN


def test_disjoint_half_planes():
    cases = [
        [1, -5, 10, 3, 4, 9],       # right of the y-axis
        [-1, -5, -10, 3, -4, 9],    # left
        [-5, 1, 3, 10, 9, 4],       # above the x-axis
        [-5, -1, 3, -10, 9, -4],    # below
    ]
    for record in cases:
        result = ContainmentDetector.classify(Triangle.from_record(record))
        assert not result.contains
        assert result.reason == ContainmentReason.DISJOINT_HALF_PLANE


def test_origin_on_edge():
    result = ContainmentDetector.classify(Triangle.from_record([-2, 0, 2, 0, 0, 5]))
    assert result.contains
    assert result.reason == ContainmentReason.ON_EDGE
    assert result.cross_products == (0, 10, 10)

    # Vertical edge through the origin
    assert ContainmentDetector.contains_origin(Triangle.from_record([0, -3, 0, 4, -6, 1]))

    # Origin on the edge's line but beyond the segment
    result = ContainmentDetector.classify(Triangle.from_record([1, 0, 4, 0, 2, 3]))
    assert not result.contains


def test_permutation_invariance():
    rng = np.random.default_rng(102)
    triangles = _random_triangles(rng, -1000, 1000, 200)
    triangles += _random_triangles(rng, -2, 2, 200)
    triangles.append(Triangle.from_record([-2, 0, 2, 0, 0, 5]))

    for triangle in triangles:
        expected = ContainmentDetector.contains_origin(triangle)
        for perm in itertools.permutations(triangle.vertices):
            assert ContainmentDetector.contains_origin(Triangle(*perm)) == expected


def test_detect_batch_matches_classify():
    rng = np.random.default_rng(7)
    triangles = _random_triangles(rng, -1000, 1000, 500)
    triangles += _random_triangles(rng, -3, 3, 500)

    vertices = np.stack([t.as_array() for t in triangles])
    contains, degenerate = ContainmentDetector.detect_batch(vertices)

    assert not degenerate.any()
    expected = [ContainmentDetector.contains_origin(t) for t in triangles]
    assert contains.tolist() == expected


def test_detect_batch_degenerate_rows():
    vertices = np.array([
        [[0, 0], [1, 1], [2, 2]],
        np.array(EXAMPLE_A).reshape(3, 2),
        np.array(EXAMPLE_B).reshape(3, 2),
    ], dtype=np.int32)

    contains, degenerate = ContainmentDetector.detect_batch(vertices)
    assert degenerate.tolist() == [True, False, False]
    assert contains.tolist() == [False, True, False]


def test_detect_batch_validation():
    contains, degenerate = ContainmentDetector.detect_batch(np.empty((0, 3, 2), dtype=np.int64))
    assert len(contains) == 0 and len(degenerate) == 0

    with pytest.raises(TypeError):
        ContainmentDetector.detect_batch(np.zeros((2, 3, 2), dtype=float))
    with pytest.raises(ValueError):
        ContainmentDetector.detect_batch(np.zeros((2, 4, 2), dtype=np.int64))


def main():
    """Run all tests."""
    tests = [value for name, value in globals().items() if name.startswith("test_")]
    for test in tests:
        test()
        print(f"✓ {test.__name__}")
    print(f"\n✅ {len(tests)} containment tests passed")


if __name__ == "__main__":
    main()
