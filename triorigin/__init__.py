"""
triorigin
=========

Bounded Context: Counting integer triangles that contain the origin.

Design Philosophy:
- Separation of Concerns: Geometry, Analytics, Orchestration separated
- Exact integer arithmetic for every decision
- One bad record never sinks the batch

Architecture:

    triorigin/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Point, Triangle
    │   ├── rational.py    # Exact lines (slope/intercept, vertical sentinel)
    │   └── detector.py    # ContainmentDetector (cross-product test)
    │
    ├── analytics/         # Counting (stateful)
    │   └── counter.py     # ContainmentCounter, BatchStats
    │
    ├── logging/           # JSON structured logging
    ├── errors.py          # Error taxonomy
    └── pipeline.py        # Orchestration

Usage:

    # 1. Geometry (immutable)
    from triorigin import Triangle, ContainmentDetector

    triangle = Triangle.from_record([-340, 495, -153, -910, 835, -947])
    ContainmentDetector.contains_origin(triangle)   # True

    # 2. Batch (pipeline)
    from triorigin import PipelineBuilder

    stats = PipelineBuilder().with_workers(4).build().run(records)
    stats.contained
"""

from triorigin.errors import (
    BatchAbortedError,
    CoordinateOutOfRangeError,
    DegenerateTriangleError,
    MalformedRecordError,
    TriangleError,
)

# Geometry Layer (immutable, stateless)
from triorigin.geometry.shapes import ORIGIN, Point, Triangle
from triorigin.geometry.rational import line_through, ratio
from triorigin.geometry.detector import (
    ContainmentDetector,
    ContainmentReason,
    ContainmentResult,
)

# Analytics Layer (stateful)
from triorigin.analytics.counter import BatchStats, ContainmentCounter, RecordError

# Pipeline (orchestration)
from triorigin.pipeline import (
    ContainmentPipeline,
    ErrorPolicy,
    PipelineBuilder,
    PipelineConfig,
    count_containing,
)

__all__ = [
    # Errors
    "TriangleError",
    "DegenerateTriangleError",
    "CoordinateOutOfRangeError",
    "MalformedRecordError",
    "BatchAbortedError",
    # Geometry
    "ORIGIN",
    "Point",
    "Triangle",
    "line_through",
    "ratio",
    "ContainmentDetector",
    "ContainmentReason",
    "ContainmentResult",
    # Analytics
    "BatchStats",
    "ContainmentCounter",
    "RecordError",
    # Pipeline
    "ContainmentPipeline",
    "ErrorPolicy",
    "PipelineBuilder",
    "PipelineConfig",
    "count_containing",
]

__version__ = "1.0.0"
