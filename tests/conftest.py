"""Shared test fixtures for bulkcast."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from bulkcast.core.handler import BulkHandler
from tests.helpers import FakeClock, RecordingSink


@pytest.fixture
def recorder() -> RecordingSink:
    """Provide a fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def clock() -> FakeClock:
    """Provide a frozen FakeClock."""
    return FakeClock()


@pytest.fixture
def make_handler(recorder: RecordingSink) -> Callable[..., BulkHandler]:
    """Factory fixture: build a BulkHandler with ``recorder`` subscribed."""

    def _factory(size: int | None = None, **kwargs) -> BulkHandler:
        handler = BulkHandler(size, **kwargs)
        recorder.subscribe(handler)
        return handler

    return _factory
