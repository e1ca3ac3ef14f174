"""Core bulk machinery — handler state machine, subject fan-out, observers."""

from bulkcast.core.errors import BulkError, StateError, ValidationError
from bulkcast.core.handler import BulkHandler, HandlerState, OpenBlockPolicy
from bulkcast.core.observer import Observer, SubjectObserver
from bulkcast.core.subject import Subject

__all__ = [
    "BulkError",
    "BulkHandler",
    "HandlerState",
    "Observer",
    "OpenBlockPolicy",
    "StateError",
    "Subject",
    "SubjectObserver",
    "ValidationError",
]
