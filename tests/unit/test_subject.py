"""Unit tests for Subject — weak subscription and fan-out."""

from __future__ import annotations

import gc

import pytest

from bulkcast.core.handler import BulkHandler
from bulkcast.core.observer import Observer
from bulkcast.core.subject import Subject
from bulkcast.models.bulk import Batch, Command
from tests.helpers import FailingSink, RecordingSink


def _batch(*texts: str) -> Batch:
    return Batch(commands=tuple(Command(text=t) for t in texts))


class TestSubscription:
    def test_subscribe_from_observer_side(self):
        subject = Subject()
        sink = RecordingSink()
        sink.subscribe(subject)

        assert subject.observers == [sink]

    def test_duplicate_subscription_ignored(self):
        subject = Subject()
        sink = RecordingSink()
        sink.subscribe(subject)
        subject.subscribe(sink)

        assert subject.observer_count == 1
        subject.notify(_batch("a"))
        assert len(sink.received) == 1

    def test_equal_but_distinct_observers_both_subscribe(self):
        class _AlwaysEqual(RecordingSink):
            def __eq__(self, other: object) -> bool:
                return isinstance(other, _AlwaysEqual)

            __hash__ = RecordingSink.__hash__

        subject = Subject()
        first = _AlwaysEqual("first")
        second = _AlwaysEqual("second")
        first.subscribe(subject)
        second.subscribe(subject)

        subject.notify(_batch("a"))
        assert subject.observer_count == 2
        assert len(first.received) == 1
        assert len(second.received) == 1

    def test_unsubscribe(self):
        subject = Subject()
        sink = RecordingSink()
        sink.subscribe(subject)
        sink.unsubscribe(subject)

        subject.notify(_batch("a"))
        assert sink.received == []
        assert subject.observer_count == 0

    def test_unsubscribe_unknown_is_noop(self):
        subject = Subject()
        subject.unsubscribe(RecordingSink())
        assert subject.observers == []

    def test_sinks_satisfy_observer_protocol(self):
        assert isinstance(RecordingSink(), Observer)


class TestWeakReferences:
    """The subject must not keep observers alive."""

    def test_released_observer_is_skipped(self):
        subject = Subject()
        survivor = RecordingSink("survivor")

        dropped = RecordingSink("dropped")
        dropped.subscribe(subject)
        survivor.subscribe(subject)
        del dropped
        gc.collect()

        subject.notify(_batch("cmd1"))

        assert survivor.rendered == ["bulk: cmd1"]
        assert subject.observers == [survivor]

    def test_released_before_handler_flush(self):
        handler = BulkHandler()
        survivor = RecordingSink()

        def _scoped_subscribe() -> None:
            transient = RecordingSink("transient")
            transient.subscribe(handler)

        _scoped_subscribe()
        survivor.subscribe(handler)
        gc.collect()

        handler.set_size(1)
        handler.add_command("cmd1")
        handler.stop()

        assert survivor.rendered == ["bulk: cmd1"]
        assert handler.observer_count == 1

    def test_subject_does_not_own_observer(self):
        subject = Subject()
        sink = RecordingSink()
        sink.subscribe(subject)
        del sink
        gc.collect()

        assert subject.observer_count == 0


class TestNotify:
    def test_delivers_in_subscription_order(self):
        subject = Subject()
        order: list[str] = []

        class _Named(RecordingSink):
            def receive(self, batch: Batch) -> None:
                order.append(self.observer_name)

        sinks = [_Named("a"), _Named("b"), _Named("c")]
        for sink in sinks:
            sink.subscribe(subject)

        subject.notify(_batch("x"))
        assert order == ["a", "b", "c"]

    def test_notify_without_observers(self):
        Subject().notify(_batch("x"))

    def test_failure_stops_remaining_fan_out(self):
        subject = Subject()
        before = RecordingSink("before")
        failing = FailingSink()
        after = RecordingSink("after")
        for sink in (before, failing, after):
            sink.subscribe(subject)

        with pytest.raises(RuntimeError):
            subject.notify(_batch("x"))

        assert len(before.received) == 1
        assert after.received == []
