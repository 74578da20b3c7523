"""
Containment Counter Module
==========================

Stateful accumulator for batch statistics.

Design:
- Mutable state (counters, error list)
- Immutable snapshots (BatchStats)
- Counts are added per chunk, so parallel chunks merge by summation
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Tuple

from triorigin.errors import TriangleError


@dataclass(frozen=True)
class RecordError:
    """A rejected record: its position in the batch and why."""

    index: int
    kind: str
    message: str

    @classmethod
    def from_exception(cls, index: int, exc: TriangleError) -> "RecordError":
        return cls(index=index, kind=exc.kind, message=str(exc))

    def __str__(self) -> str:
        return f"#{self.index} [{self.kind}] {self.message}"


@dataclass(frozen=True)
class BatchStats:
    """
    Immutable statistics snapshot for a batch.

    Rejected records count toward ``total`` only; ``evaluated`` is the
    denominator for ``contained`` and ``excluded``.
    """

    total: int = 0
    evaluated: int = 0
    contained: int = 0
    errors: Tuple[RecordError, ...] = field(default_factory=tuple)

    @property
    def excluded(self) -> int:
        return self.evaluated - self.contained

    @property
    def rejected(self) -> int:
        return len(self.errors)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "evaluated": self.evaluated,
            "contained": self.contained,
            "excluded": self.excluded,
            "rejected": self.rejected,
            "errors": [
                {"index": e.index, "kind": e.kind, "message": e.message}
                for e in self.errors
            ],
        }

    def __str__(self) -> str:
        text = f"{self.contained} of {self.evaluated} triangles contain the origin"
        if self.errors:
            text += f" ({self.rejected} rejected)"
        return text


class ContainmentCounter:
    """
    Accumulates containment results across chunks.

    Usage:
        counter = ContainmentCounter()
        counter.update(mask)               # one chunk of classified triangles
        counter.record_error(7, exc)       # a rejected record
        stats = counter.get_stats()        # immutable
    """

    def __init__(self):
        self._total = 0
        self._evaluated = 0
        self._contained = 0
        self._errors: List[RecordError] = []

    def update(self, mask: np.ndarray) -> None:
        """
        Add one chunk of classified triangles.

        Args:
            mask: Boolean mask, True = triangle contains the origin
        """
        self.add(contained=int(np.count_nonzero(mask)), evaluated=len(mask))

    def add(self, contained: int, evaluated: int) -> None:
        self._total += evaluated
        self._evaluated += evaluated
        self._contained += contained

    def record_error(self, index: int, exc: TriangleError) -> RecordError:
        error = RecordError.from_exception(index, exc)
        self._total += 1
        self._errors.append(error)
        return error

    def get_stats(self) -> BatchStats:
        return BatchStats(
            total=self._total,
            evaluated=self._evaluated,
            contained=self._contained,
            errors=tuple(sorted(self._errors, key=lambda e: e.index)),
        )

    def reset(self) -> None:
        """Reset all counters to zero."""
        self._total = 0
        self._evaluated = 0
        self._contained = 0
        self._errors.clear()

    def __repr__(self) -> str:
        return (
            f"ContainmentCounter(contained={self._contained}, "
            f"evaluated={self._evaluated}, rejected={len(self._errors)})"
        )
