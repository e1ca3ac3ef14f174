"""Concrete bulk sinks.

Every sink is an ``Observer``: it subscribes itself to a handler and
renders each bulk it receives to its own destination.
"""

from bulkcast.sinks.console import ConsoleSink
from bulkcast.sinks.file import FileSink

__all__ = ["ConsoleSink", "FileSink"]
