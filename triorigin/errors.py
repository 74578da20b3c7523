"""
Error Taxonomy
==============

Per-record failures are ValueError subclasses so callers that only care
about "bad input" can catch one type. Batch-level abort is separate.
"""


class TriangleError(ValueError):
    """Base class for a record that cannot be classified."""

    kind = "invalid"


class DegenerateTriangleError(TriangleError):
    """Vertices are repeated or collinear (zero area)."""

    kind = "degenerate"


class CoordinateOutOfRangeError(TriangleError):
    """A coordinate lies outside [MIN_AXIS, MAX_AXIS]."""

    kind = "out_of_range"


class MalformedRecordError(TriangleError):
    """Record does not carry exactly six integers."""

    kind = "malformed"


class BatchAbortedError(RuntimeError):
    """Raised under the abort policy when a record fails."""

    def __init__(self, index: int, cause: TriangleError):
        super().__init__(f"Record {index} rejected: {cause}")
        self.index = index
        self.cause = cause
