"""Bulkcast: batch a stream of commands into bulks and fan them out to sinks.

Commands are grouped either into fixed-size bulks of N or into dynamic
``{`` ... ``}`` blocks, and each completed bulk is delivered to every
subscribed sink (console, file, ...).
"""

__version__ = "0.1.0"
__description__ = "Batch text commands into bulks and publish them to sinks"

from bulkcast.core.errors import BulkError, StateError, ValidationError
from bulkcast.core.handler import BulkHandler, OpenBlockPolicy
from bulkcast.models.bulk import Batch, Command
from bulkcast.sinks import ConsoleSink, FileSink

__all__ = [
    "Batch",
    "BulkError",
    "BulkHandler",
    "Command",
    "ConsoleSink",
    "FileSink",
    "OpenBlockPolicy",
    "StateError",
    "ValidationError",
    "__version__",
]
