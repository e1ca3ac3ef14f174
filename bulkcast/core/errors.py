"""Exception hierarchy for bulk accumulation.

Every error raised by the handler derives from ``BulkError`` so callers
can catch the whole family with a single handler.
"""

from __future__ import annotations


class BulkError(Exception):
    """Base class for bulkcast errors."""


class ValidationError(BulkError, ValueError):
    """Raised when an input value is rejected (oversized command, N < 1)."""


class StateError(BulkError, RuntimeError):
    """Raised when an operation is not valid in the handler's current state."""
