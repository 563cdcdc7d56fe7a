"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
sharing the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        AttendanceRepository,
        EventCatalogRepository,
        PaymentRepository,
        UserDirectoryRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_attendance_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "AttendanceRepository":
    """Get attendance repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        AttendanceRepository instance.

    Usage:
        @router.get("/attendances/{attendance_id}")
        async def get_attendance(
            repo: AttendanceRepository = Depends(get_attendance_repository),
        ): ...
    """
    from src.infrastructure.persistence.repositories import AttendanceRepository

    return AttendanceRepository(session=session)


async def get_payment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PaymentRepository":
    """Get payment repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import PaymentRepository

    return PaymentRepository(session=session)


async def get_event_catalog_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EventCatalogRepository":
    """Get read-only event catalog (request-scoped)."""
    from src.infrastructure.persistence.repositories import EventCatalogRepository

    return EventCatalogRepository(session=session)


async def get_user_directory_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserDirectoryRepository":
    """Get read-only user directory (request-scoped)."""
    from src.infrastructure.persistence.repositories import UserDirectoryRepository

    return UserDirectoryRepository(session=session)
