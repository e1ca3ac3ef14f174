"""File sink — writes each bulk to its own log file.

Layout: ``{directory}/bulk{timestamp}_{sink_id}.log``

The timestamp comes from an injected clock read at delivery time.  The
file holds exactly the rendered bulk, with no trailing newline.  Existing
files are never overwritten: a bulk that would reuse a name is written
to ``bulk{timestamp}_{sink_id}_{n}.log`` with the first free ``n``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from bulkcast.core.observer import SubjectObserver
from bulkcast.models.bulk import Batch
from bulkcast.sinks._formatting import bulk_file_name

logger = logging.getLogger(__name__)


class FileSink(SubjectObserver):
    """Writes bulks to files named after the delivery time.

    Parameters
    ----------
    directory:
        Target directory, created on first use.  Defaults to the current
        working directory.
    clock:
        Returns epoch seconds.  Defaults to ``time.time``.
    sink_id:
        Distinguishes sinks that may write in the same second.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        clock: Callable[[], float] = time.time,
        sink_id: int = 1,
    ) -> None:
        self._directory = Path(directory) if directory else Path(".")
        self._clock = clock
        self._sink_id = sink_id
        self._written: list[Path] = []

    @property
    def observer_name(self) -> str:
        return f"file-{self._sink_id}"

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def written_files(self) -> list[Path]:
        """Paths written by this sink, in delivery order."""
        return list(self._written)

    def path_for(self, timestamp: float, sequence: int = 1) -> Path:
        """Return the file path for the *sequence*-th bulk delivered at *timestamp*."""
        return self._directory / bulk_file_name(timestamp, self._sink_id, sequence)

    def receive(self, batch: Batch) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        timestamp = self._clock()
        sequence = 1
        while True:
            target = self.path_for(timestamp, sequence)
            try:
                with target.open("x", encoding="utf-8") as fh:
                    fh.write(batch.render())
                break
            except FileExistsError:
                sequence += 1
        self._written.append(target)
        logger.debug("FileSink: wrote %s", target)
