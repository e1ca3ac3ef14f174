"""Shared formatting helpers for bulk sinks."""

from __future__ import annotations

from bulkcast.models.bulk import Batch


def format_console_line(batch: Batch) -> str:
    """Return the console rendering of *batch*: one line per bulk.

    Examples
    --------
    >>> from bulkcast.models.bulk import Batch, Command
    >>> format_console_line(Batch(commands=(Command(text="a"), Command(text="b"))))
    'bulk: a, b\\n'
    """
    return batch.render() + "\n"


def bulk_file_name(timestamp: float, sink_id: int = 1, sequence: int = 1) -> str:
    """Return the file name a ``FileSink`` uses for a bulk.

    The timestamp is truncated to whole seconds; *sink_id* keeps sinks
    writing in the same second apart.  Later bulks from the same sink in
    the same second get a ``_{sequence}`` suffix.
    """
    if sequence > 1:
        return f"bulk{int(timestamp)}_{sink_id}_{sequence}.log"
    return f"bulk{int(timestamp)}_{sink_id}.log"
