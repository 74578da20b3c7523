"""
Containment Pipeline Module
===========================

Bounded Context: Batch orchestration.

Design:
- Orchestrator: builds triangles, classifies, counts, logs
- Builder pattern: fluent configuration
- Per-record failures are recorded, not fatal (unless policy is abort)
- Count is a reduction over chunk results; chunks may run on a thread pool

Dependencies:
- numpy (vectorised chunk classification)
- triorigin.geometry (shapes, detector, rational diagnostics)
- triorigin.analytics (counter, stats)
"""

import logging
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Sequence
from typing import Any, Iterable, List, Tuple

from triorigin.analytics.counter import BatchStats, ContainmentCounter
from triorigin.errors import BatchAbortedError, MalformedRecordError, TriangleError
from triorigin.geometry.detector import ContainmentDetector
from triorigin.geometry.rational import axis_crossings
from triorigin.geometry.shapes import Triangle
from triorigin.logging import LogEvent, StructuredLogger, create_logger


class ErrorPolicy(str, Enum):
    """What to do when a record cannot be classified."""

    SKIP = "skip"
    ABORT = "abort"


@dataclass
class PipelineConfig:
    """
    Pipeline configuration.

    Attributes:
        error_policy: skip (record and continue) or abort
        workers: Thread count for chunk classification (1 = serial)
        chunk_size: Triangles per vectorised chunk
        trace: Log every classification at DEBUG
        logger: Structured logger
    """

    error_policy: ErrorPolicy = ErrorPolicy.SKIP
    workers: int = 1
    chunk_size: int = 256
    trace: bool = False
    logger: StructuredLogger = field(default_factory=lambda: create_logger("pipeline"))

    def __post_init__(self):
        self.error_policy = ErrorPolicy(self.error_policy)
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")


def build_triangle(record: Any) -> Triangle:
    """
    Turn one input record into a Triangle.

    Accepts a Triangle, three (x, y) pairs, or six flat values.

    Raises:
        TriangleError: malformed, out of range or degenerate record
    """
    if isinstance(record, Triangle):
        return record
    if isinstance(record, np.ndarray):
        record = record.tolist()
    if isinstance(record, (str, bytes)) or not isinstance(record, Sequence):
        raise MalformedRecordError(
            f"Record must be a sequence of values, got {type(record).__name__}"
        )
    if len(record) == 3:
        return Triangle.from_points(record)
    return Triangle.from_record(record)


def _classify_chunk(chunk: Sequence[Triangle]) -> np.ndarray:
    """Classify one chunk; returns its containment mask."""
    vertices = np.stack([t.as_array() for t in chunk])
    contains, _ = ContainmentDetector.detect_batch(vertices)
    return contains


class ContainmentPipeline:
    """
    Counts the triangles of a batch that contain the origin.

    Pipeline stages:
    1. Build (validate each record into a Triangle)
    2. Classify (vectorised, chunked, optionally parallel)
    3. Reduce (sum chunk counts into a ContainmentCounter)

    Usage:
        pipeline = PipelineBuilder().with_workers(4).build()
        stats = pipeline.run(records)
        print(stats.contained)
    """

    def __init__(self, config: PipelineConfig):
        self.config = config
        self.logger = config.logger

    def run(self, records: Iterable[Any]) -> BatchStats:
        """
        Process a batch.

        Args:
            records: Triangles, point triples or six-value records

        Returns:
            Immutable batch statistics

        Raises:
            BatchAbortedError: a record failed under the abort policy
        """
        counter = ContainmentCounter()
        if self.config.trace and not self.logger.logger.isEnabledFor(logging.DEBUG):
            self.logger.set_level(logging.DEBUG)

        self.logger.info(
            event=LogEvent.BATCH_STARTED,
            message="Batch started",
            metadata={
                'error_policy': self.config.error_policy.value,
                'workers': self.config.workers,
                'chunk_size': self.config.chunk_size,
            }
        )

        triangles = self._build(records, counter)

        if self.config.trace:
            for index, triangle in triangles:
                self._trace(index, triangle)

        chunks = self._chunks([t for _, t in triangles])
        for mask in self._classify(chunks):
            counter.update(mask)

        stats = counter.get_stats()
        self.logger.info(
            event=LogEvent.BATCH_COMPLETED,
            message=str(stats),
            metadata={
                'total': stats.total,
                'evaluated': stats.evaluated,
                'contained': stats.contained,
                'rejected': stats.rejected,
            }
        )
        return stats

    def _build(
        self, records: Iterable[Any], counter: ContainmentCounter
    ) -> List[Tuple[int, Triangle]]:
        triangles = []
        for index, record in enumerate(records):
            try:
                triangles.append((index, build_triangle(record)))
            except TriangleError as e:
                if self.config.error_policy is ErrorPolicy.ABORT:
                    self.logger.error(
                        event=LogEvent.BATCH_ABORTED,
                        message=f"Record {index} rejected, aborting batch",
                        metadata={'index': index, 'kind': e.kind},
                        exc_info=e,
                    )
                    raise BatchAbortedError(index, e) from e
                error = counter.record_error(index, e)
                self.logger.warning(
                    event=LogEvent.RECORD_REJECTED,
                    message=error.message,
                    metadata={'index': index, 'kind': error.kind}
                )
        return triangles

    def _chunks(self, triangles: List[Triangle]) -> List[List[Triangle]]:
        size = self.config.chunk_size
        return [triangles[i:i + size] for i in range(0, len(triangles), size)]

    def _classify(self, chunks: List[List[Triangle]]) -> List[np.ndarray]:
        if self.config.workers == 1 or len(chunks) <= 1:
            return [_classify_chunk(chunk) for chunk in chunks]
        with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
            return list(pool.map(_classify_chunk, chunks))

    def _trace(self, index: int, triangle: Triangle) -> None:
        result = ContainmentDetector.classify(triangle)
        crossings = axis_crossings(triangle)
        self.logger.debug(
            event=LogEvent.TRIANGLE_CLASSIFIED,
            message=f"{triangle}: {'contains' if result.contains else 'does not contain'} origin",
            metadata={
                'index': index,
                'contains': result.contains,
                'reason': result.reason.value,
                'cross_products': list(result.cross_products),
                'x_at_y0': {k: None if v is None else str(v) for k, v in crossings.items()},
            }
        )


class PipelineBuilder:
    """
    Fluent builder for ContainmentPipeline.

    Usage:
        pipeline = (
            PipelineBuilder()
            .with_policy("abort")
            .with_workers(4)
            .with_trace(True)
            .build()
        )
    """

    def __init__(self):
        self._error_policy: ErrorPolicy = ErrorPolicy.SKIP
        self._workers: int = 1
        self._chunk_size: int = 256
        self._trace: bool = False
        self._logger: StructuredLogger | None = None

    def with_policy(self, policy: ErrorPolicy | str) -> "PipelineBuilder":
        """Set error policy (skip or abort)."""
        self._error_policy = ErrorPolicy(policy)
        return self

    def with_workers(self, workers: int) -> "PipelineBuilder":
        """Set thread count for chunk classification."""
        self._workers = workers
        return self

    def with_chunk_size(self, chunk_size: int) -> "PipelineBuilder":
        """Set triangles per chunk."""
        self._chunk_size = chunk_size
        return self

    def with_trace(self, trace: bool) -> "PipelineBuilder":
        """Log every classification at DEBUG."""
        self._trace = trace
        return self

    def with_logger(self, logger: StructuredLogger) -> "PipelineBuilder":
        self._logger = logger
        return self

    def build(self) -> ContainmentPipeline:
        """
        Build the pipeline.

        Raises:
            ValueError: invalid workers or chunk size
        """
        if self._logger is None:
            level = logging.DEBUG if self._trace else None
            self._logger = create_logger("pipeline", level=level)

        config = PipelineConfig(
            error_policy=self._error_policy,
            workers=self._workers,
            chunk_size=self._chunk_size,
            trace=self._trace,
            logger=self._logger,
        )
        return ContainmentPipeline(config)


def count_containing(triangles: Iterable[Triangle]) -> int:
    """Number of triangles containing the origin."""
    return sum(ContainmentDetector.contains_origin(t) for t in triangles)
