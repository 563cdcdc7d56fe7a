"""Pytest configuration shared by all test suites.

This configuration provides:
1. Custom markers (unit, integration, api)
2. Automatic asyncio marker for coroutine tests
3. An isolated PostgreSQL database for integration tests (skipped when
   the database configured in DATABASE_URL is unreachable)
4. Builders for domain entities used across suites
"""

import inspect
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

import pytest
import pytest_asyncio
from sqlalchemy import text
from uuid_extensions import uuid7

from src.domain.entities.attendance import Attendance
from src.domain.entities.payment import Payment
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.value_objects.money import Money


# =============================================================================
# Test helper functions for domain entities
# =============================================================================


def create_attendance(
    *,
    event_id: UUID | None = None,
    user_id: UUID | None = None,
    status: AttendanceStatus = AttendanceStatus.REGISTERED,
    notes: str | None = None,
    created_at: datetime | None = None,
) -> Attendance:
    """Helper to create an Attendance in a given status.

    Check-in/check-out timestamps are filled so the entity invariants hold
    for the requested status.
    """
    now = datetime.now(UTC)
    check_in_time = None
    check_out_time = None
    if status in (AttendanceStatus.CHECKED_IN, AttendanceStatus.CHECKED_OUT):
        check_in_time = now
    if status == AttendanceStatus.CHECKED_OUT:
        check_out_time = now

    return Attendance(
        id=uuid7(),
        event_id=event_id or uuid7(),
        user_id=user_id or uuid7(),
        status=status,
        check_in_time=check_in_time,
        check_out_time=check_out_time,
        notes=notes,
        created_at=created_at or now,
        updated_at=created_at or now,
    )


def create_payment(
    *,
    user_id: UUID | None = None,
    event_id: UUID | None = None,
    amount: str = "25.00",
    currency: Currency = Currency.EUR,
    provider: PaymentProvider = PaymentProvider.CASH,
    payment_method: PaymentMethod = PaymentMethod.CASH,
    status: PaymentStatus = PaymentStatus.PENDING,
    provider_payment_id: str | None = None,
    created_at: datetime | None = None,
) -> Payment:
    """Helper to create a Payment in a given status.

    Completed and refunded payments get a provider reference unless one is
    given explicitly.
    """
    if provider_payment_id is None and status in (
        PaymentStatus.COMPLETED,
        PaymentStatus.REFUNDED,
    ):
        provider_payment_id = f"ref_{uuid7().hex[:12]}"

    moment = created_at or datetime.now(UTC)
    return Payment(
        id=uuid7(),
        user_id=user_id or uuid7(),
        event_id=event_id or uuid7(),
        amount=Money(Decimal(amount), currency),
        provider=provider,
        payment_method=payment_method,
        status=status,
        provider_payment_id=provider_payment_id,
        created_at=moment,
        updated_at=moment,
    )


# =============================================================================
# Integration database
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database with freshly created tables.

    Each test gets its own Database instance (bypassing the container
    singleton). Tables are created before the test and emptied after it.
    Tests are skipped when PostgreSQL is not reachable.
    """
    from src.core.config import settings
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=settings.database_url)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL is not reachable at DATABASE_URL")

    await db.create_all()
    yield db

    async with db.engine.begin() as conn:
        await conn.execute(
            text("TRUNCATE TABLE payments, attendances, events, users")
        )
    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide an AsyncSession bound to the integration database."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Pytest hooks
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with in-memory fakes")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP endpoint tests using TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
