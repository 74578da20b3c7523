"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per line)
- Thread-safe (uses standard logging module)
- Contextual metadata (index, counts, etc.)
- Type-safe events (LogEvent enum)

Architecture:
- Wraps Python's logging module
- Adds structured metadata
- Formats as JSON on stderr, leaving stdout for results
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "pipeline", "cli")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "pipeline")
            level: Logging level. None keeps the level of an existing
                logger; a new logger starts at INFO
            logger_name: Custom logger name (default: triorigin.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"triorigin.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log DEBUG level message.

        Used for per-triangle trace output.
        """
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.RECORD_REJECTED,
            ...     message="Triangle (0,0),(1,1),(2,2) has collinear vertices",
            ...     metadata={'index': 4, 'kind': 'degenerate'}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance (type and message are embedded)
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter; StructuredLogger already emits JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Without a level, an existing logger of the same component keeps its own.

    Example:
        >>> logger = create_logger("pipeline", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
