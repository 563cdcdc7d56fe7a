"""Fixtures for API tests.

The real application is exercised end to end; only the request-scoped
repositories and the processor registry are swapped for in-memory doubles
through ``app.dependency_overrides``. The client is not entered as a
context manager, so the lifespan (database disposal) does not run.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.core.container import (
    get_attendance_repository,
    get_event_catalog_repository,
    get_payment_processors,
    get_payment_repository,
    get_user_directory_repository,
)
from src.domain.enums.payment_provider import PaymentProvider
from src.infrastructure.payments import OfflinePaymentProcessor, PaymentProcessorRegistry
from src.main import app
from tests.fakes import (
    FakeEventCatalog,
    FakeUserDirectory,
    InMemoryAttendanceRepository,
    InMemoryPaymentRepository,
    StubPaymentProcessor,
)


class Platform:
    """In-memory state shared by every request of one test."""

    def __init__(self) -> None:
        self.attendances = InMemoryAttendanceRepository()
        self.payments = InMemoryPaymentRepository()
        self.events = FakeEventCatalog()
        self.users = FakeUserDirectory()
        self.stripe = StubPaymentProcessor(PaymentProvider.STRIPE)
        self.processors = PaymentProcessorRegistry(
            [self.stripe, OfflinePaymentProcessor(PaymentProvider.CASH)]
        )


@pytest.fixture
def platform() -> Iterator[Platform]:
    state = Platform()
    app.dependency_overrides[get_attendance_repository] = lambda: state.attendances
    app.dependency_overrides[get_payment_repository] = lambda: state.payments
    app.dependency_overrides[get_event_catalog_repository] = lambda: state.events
    app.dependency_overrides[get_user_directory_repository] = lambda: state.users
    app.dependency_overrides[get_payment_processors] = lambda: state.processors
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def client(platform: Platform) -> TestClient:
    return TestClient(app)
