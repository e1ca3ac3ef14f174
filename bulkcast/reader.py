"""Feeds a line-oriented text stream into a ``BulkHandler``."""

from __future__ import annotations

from collections.abc import Iterable

from bulkcast.core.handler import BulkHandler


def feed_lines(handler: BulkHandler, lines: Iterable[str], *, stop: bool = True) -> int:
    """Push each line of *lines* into *handler* as one command.

    Trailing ``\\r\\n`` / ``\\n`` terminators are stripped; any other
    whitespace is part of the command.  ``handler.stop()`` is called once
    the input is exhausted unless *stop* is false.

    Returns the number of lines consumed.
    """
    count = 0
    for line in lines:
        handler.add_command(line.rstrip("\r\n"))
        count += 1
    if stop:
        handler.stop()
    return count
