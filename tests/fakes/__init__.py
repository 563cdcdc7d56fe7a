"""In-memory test doubles for repositories, processors and the event bus."""

from tests.fakes.event_bus import RecordingEventBus
from tests.fakes.processors import StubPaymentProcessor
from tests.fakes.repositories import (
    FakeEventCatalog,
    FakeUserDirectory,
    InMemoryAttendanceRepository,
    InMemoryPaymentRepository,
)

__all__ = [
    "FakeEventCatalog",
    "FakeUserDirectory",
    "InMemoryAttendanceRepository",
    "InMemoryPaymentRepository",
    "RecordingEventBus",
    "StubPaymentProcessor",
]
