"""Observer protocol for bulk delivery.

All sinks implement the ``Observer`` protocol: an ``observer_name``
property and a ``receive(batch)`` method.  The subject calls ``receive``
on every live subscriber for every flushed batch.

Subscription is initiated from the observer side::

    console = ConsoleSink()
    console.subscribe(handler)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bulkcast.models.bulk import Batch

if TYPE_CHECKING:
    from bulkcast.core.subject import Subject


@runtime_checkable
class Observer(Protocol):
    """Protocol that every bulk sink must implement.

    Attributes
    ----------
    observer_name : str
        A human-readable identifier used in log messages
        (e.g. ``"console"``, ``"file"``).
    """

    @property
    def observer_name(self) -> str:
        """Return the name of this observer."""
        ...

    def receive(self, batch: Batch) -> None:
        """Render a completed batch to this observer's destination.

        Exceptions raised here propagate to whoever triggered the flush.
        """
        ...


class SubjectObserver:
    """Mixin giving observers the ``subscribe(subject)`` entry point.

    The subject keeps only a weak reference to the observer, so the
    caller that created the observer must keep it alive for as long as
    it should receive batches.
    """

    @property
    def observer_name(self) -> str:
        return type(self).__name__

    def receive(self, batch: Batch) -> None:
        raise NotImplementedError

    def subscribe(self, subject: Subject) -> None:
        """Register this observer with *subject*."""
        subject.subscribe(self)

    def unsubscribe(self, subject: Subject) -> None:
        """Remove this observer from *subject*."""
        subject.unsubscribe(self)
