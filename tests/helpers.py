"""Test doubles shared across the bulkcast test suite."""

from __future__ import annotations

from bulkcast.core.handler import BulkHandler
from bulkcast.core.observer import SubjectObserver
from bulkcast.models.bulk import Batch


class RecordingSink(SubjectObserver):
    """An observer that keeps every batch it receives."""

    def __init__(self, name: str = "recording") -> None:
        self._name = name
        self.received: list[Batch] = []

    @property
    def observer_name(self) -> str:
        return self._name

    @property
    def rendered(self) -> list[str]:
        return [batch.render() for batch in self.received]

    def receive(self, batch: Batch) -> None:
        self.received.append(batch)


class FailingSink(SubjectObserver):
    """An observer whose ``receive`` always raises."""

    @property
    def observer_name(self) -> str:
        return "failing"

    def receive(self, batch: Batch) -> None:
        raise RuntimeError("Sink failure for testing")


class FakeClock:
    """Deterministic clock: returns ``now`` and advances by ``step`` per call."""

    def __init__(self, start: float = 1_700_000_000.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


def push(handler: BulkHandler, *commands: str) -> None:
    """Feed several commands into *handler* in order."""
    for command in commands:
        handler.add_command(command)
