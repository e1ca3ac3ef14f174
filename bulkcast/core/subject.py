"""Subject — fans each batch out to every live observer.

The subject never owns its observers: it stores ``weakref.ref`` handles
and prunes the dead ones lazily whenever it notifies.  Delivery is
synchronous, on the caller's thread, in subscription order.

Observer exceptions are not contained.  If ``receive`` raises, the
exception propagates to the caller of ``notify`` and the observers after
the failing one do not see that batch.
"""

from __future__ import annotations

import logging
import weakref

from bulkcast.core.observer import Observer
from bulkcast.models.bulk import Batch

logger = logging.getLogger(__name__)


class Subject:
    """Holds non-owning references to observers and notifies them.

    Usage
    -----
    >>> subject = Subject()
    >>> sink.subscribe(subject)
    >>> subject.notify(batch)
    """

    def __init__(self) -> None:
        self._refs: list[weakref.ref[Observer]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        """Add *observer* to the delivery set.

        Observers are notified in subscription order.  Subscribing an
        observer that is already subscribed is a no-op.
        """
        if any(ref() is observer for ref in self._refs):
            return
        self._refs.append(weakref.ref(observer))
        logger.debug("Subscribed observer: %s", observer.observer_name)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove *observer* from the delivery set.  Unknown observers are ignored."""
        for ref in self._refs:
            if ref() is observer:
                self._refs.remove(ref)
                logger.debug("Unsubscribed observer: %s", observer.observer_name)
                return

    @property
    def observers(self) -> list[Observer]:
        """Return the observers that are still alive, in subscription order."""
        alive = []
        for ref in self._refs:
            observer = ref()
            if observer is not None:
                alive.append(observer)
        return alive

    @property
    def observer_count(self) -> int:
        return len(self.observers)

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    def notify(self, batch: Batch) -> None:
        """Deliver *batch* to every live observer.

        Expired references are dropped before delivery; they are never
        an error.
        """
        live: list[Observer] = []
        kept: list[weakref.ref[Observer]] = []
        for ref in self._refs:
            observer = ref()
            if observer is None:
                continue
            kept.append(ref)
            live.append(observer)

        pruned = len(self._refs) - len(kept)
        if pruned:
            logger.debug("Pruned %d expired observer(s)", pruned)
        self._refs = kept

        for observer in live:
            observer.receive(batch)
