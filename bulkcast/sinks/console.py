"""Console sink — prints each bulk on its own line."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from bulkcast.core.observer import SubjectObserver
from bulkcast.models.bulk import Batch
from bulkcast.sinks._formatting import format_console_line

logger = logging.getLogger(__name__)


class ConsoleSink(SubjectObserver):
    """Writes ``bulk: ...`` lines to a text stream.

    Parameters
    ----------
    stream:
        Destination stream.  Defaults to ``sys.stdout`` resolved at
        write time, so output redirection keeps working.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def observer_name(self) -> str:
        return "console"

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def receive(self, batch: Batch) -> None:
        stream = self.stream
        stream.write(format_console_line(batch))
        stream.flush()
        logger.debug("ConsoleSink: wrote bulk of %d command(s)", len(batch))
