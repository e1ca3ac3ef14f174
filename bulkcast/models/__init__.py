"""Bulkcast data models — all Pydantic v2, all frozen (immutable)."""

from bulkcast.models.bulk import (
    BULK_PREFIX,
    BULK_SEPARATOR,
    MAX_COMMAND_LENGTH,
    Batch,
    Command,
)

__all__ = [
    "BULK_PREFIX",
    "BULK_SEPARATOR",
    "MAX_COMMAND_LENGTH",
    "Batch",
    "Command",
]
