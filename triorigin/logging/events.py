"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>

    component: batch, triangle, record, config, input, error

Example Log Query (jq):
    jq 'select(.event == "record.rejected") | .metadata.kind' run.log
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - batch.*: Batch lifecycle
    - triangle.*: Per-triangle trace
    - record.*: Per-record rejection
    - config.*, input.*: Setup
    - error.*: Error conditions
    """

    # ========== Batch Events ==========
    BATCH_STARTED = "batch.started"
    """Batch processing started."""

    BATCH_COMPLETED = "batch.completed"
    """Batch processed; final counts available."""

    # ========== Triangle Events ==========
    TRIANGLE_CLASSIFIED = "triangle.classified"
    """One triangle classified (trace mode only)."""

    # ========== Record Events ==========
    RECORD_REJECTED = "record.rejected"
    """Record was degenerate, out of range or malformed."""

    # ========== Setup Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded."""

    INPUT_READ = "input.read"
    """Input file read."""

    # ========== Error Events ==========
    BATCH_ABORTED = "error.batch_aborted"
    """Batch aborted under the abort policy."""

    INPUT_ERROR = "error.input"
    """Input or configuration could not be read."""

