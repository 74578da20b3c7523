"""
Structured Logging for triorigin
================================

Bounded Context: Observability

JSON-structured logging, one object per line on stderr.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from triorigin.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="pipeline")
    >>> logger.info(
    ...     event=LogEvent.BATCH_COMPLETED,
    ...     message="228 of 1000 triangles contain the origin",
    ...     metadata={'contained': 228, 'evaluated': 1000}
    ... )

Output:
    {
        "timestamp": "2025-10-24T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "pipeline",
        "event": "batch.completed",
        "message": "228 of 1000 triangles contain the origin",
        "metadata": {"contained": 228, "evaluated": 1000}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
