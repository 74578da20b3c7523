"""
Containment Detector Module
===========================

Stateless origin-containment decision.

Design:
- Pure functions (no state)
- Half-plane test via integer cross products (no division, no floats)
- Scalar form returns a reason for diagnostics
- Vectorised numpy form for batches
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from triorigin.geometry.shapes import ORIGIN, Point, Triangle


class ContainmentReason(str, Enum):
    """Which rule decided the classification."""

    VERTEX_AT_ORIGIN = "vertex_at_origin"
    DISJOINT_HALF_PLANE = "disjoint_half_plane"
    INTERIOR = "interior"
    ON_EDGE = "on_edge"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class ContainmentResult:
    """
    Outcome of classifying one triangle.

    Attributes:
        contains: True if the origin is inside or on the boundary
        reason: Rule that produced the answer
        cross_products: (AB, BC, CA) cross products in A->B->C winding
    """

    contains: bool
    reason: ContainmentReason
    cross_products: Tuple[int, int, int]


class ContainmentDetector:
    """
    Stateless detector deciding whether a triangle contains the origin.

    For every directed edge P1->P2 the cross product of (P2 - P1) with
    (O - P1) tells which side of the edge's line the origin is on. The
    origin is inside the closed triangle iff no two of the three products
    have strictly opposite signs. Reversing the winding flips all three
    signs, so the answer does not depend on vertex order.
    """

    @staticmethod
    def cross(p1: Point, p2: Point) -> int:
        """Cross product (P2 - P1) x (O - P1)."""
        return (p2.x - p1.x) * (ORIGIN.y - p1.y) - (p2.y - p1.y) * (ORIGIN.x - p1.x)

    @staticmethod
    def cross_products(triangle: Triangle) -> Tuple[int, int, int]:
        ab, bc, ca = (
            ContainmentDetector.cross(p1, p2) for _, p1, p2 in triangle.edges()
        )
        return ab, bc, ca

    @staticmethod
    def classify(triangle: Triangle) -> ContainmentResult:
        """
        Classify one triangle.

        Args:
            triangle: Non-degenerate triangle (validated at construction)

        Returns:
            ContainmentResult with the deciding rule
        """
        crosses = ContainmentDetector.cross_products(triangle)
        vertices = triangle.vertices

        if ORIGIN in vertices:
            return ContainmentResult(True, ContainmentReason.VERTEX_AT_ORIGIN, crosses)

        # Whole triangle strictly left/right/below/above the origin
        if (
            all(p.x > 0 for p in vertices)
            or all(p.x < 0 for p in vertices)
            or all(p.y > 0 for p in vertices)
            or all(p.y < 0 for p in vertices)
        ):
            return ContainmentResult(False, ContainmentReason.DISJOINT_HALF_PLANE, crosses)

        if all(c > 0 for c in crosses) or all(c < 0 for c in crosses):
            return ContainmentResult(True, ContainmentReason.INTERIOR, crosses)

        if 0 in crosses and (
            all(c >= 0 for c in crosses) or all(c <= 0 for c in crosses)
        ):
            return ContainmentResult(True, ContainmentReason.ON_EDGE, crosses)

        return ContainmentResult(False, ContainmentReason.OUTSIDE, crosses)

    @staticmethod
    def contains_origin(triangle: Triangle) -> bool:
        return ContainmentDetector.classify(triangle).contains

    @staticmethod
    def detect_batch(vertices: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Vectorised containment over many triangles.

        Args:
            vertices: Integer array of shape (N, 3, 2)

        Returns:
            Tuple of:
            - contains: Boolean mask (N,), True = origin inside or on boundary
            - degenerate: Boolean mask (N,), True = zero-area row (never contains)

        Raises:
            TypeError: non-integer dtype
            ValueError: wrong shape
        """
        vertices = np.asarray(vertices)
        if vertices.size == 0:
            return np.array([], dtype=bool), np.array([], dtype=bool)
        if not np.issubdtype(vertices.dtype, np.integer):
            raise TypeError(f"vertices must have an integer dtype, got {vertices.dtype}")
        if vertices.ndim != 3 or vertices.shape[1:] != (3, 2):
            raise ValueError(f"vertices must be Nx3x2 array, got shape {vertices.shape}")

        v = vertices.astype(np.int64)
        start = v
        end = np.roll(v, -1, axis=1)  # A->B, B->C, C->A

        dx = end[..., 0] - start[..., 0]
        dy = end[..., 1] - start[..., 1]
        crosses = dx * (ORIGIN.y - start[..., 1]) - dy * (ORIGIN.x - start[..., 0])

        a, b, c = v[:, 0], v[:, 1], v[:, 2]
        area2 = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (c[:, 0] - a[:, 0]) * (b[:, 1] - a[:, 1])
        degenerate = area2 == 0

        same_side = np.all(crosses >= 0, axis=1) | np.all(crosses <= 0, axis=1)
        return same_side & ~degenerate, degenerate
