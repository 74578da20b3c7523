"""
Analytics Layer
===============

Bounded Context: Stateful counting over a batch.

Responsibilities:
- Accumulate containment counts (mutable state)
- Collect per-record rejections
- Generate immutable statistics snapshots
"""

from triorigin.analytics.counter import BatchStats, ContainmentCounter, RecordError

__all__ = [
    "BatchStats",
    "ContainmentCounter",
    "RecordError",
]
