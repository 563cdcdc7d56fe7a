"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.attendance_repository import (
    AttendanceRepository,
)
from src.infrastructure.persistence.repositories.event_catalog_repository import (
    EventCatalogRepository,
    UserDirectoryRepository,
)
from src.infrastructure.persistence.repositories.payment_repository import (
    PaymentRepository,
)

__all__ = [
    "AttendanceRepository",
    "EventCatalogRepository",
    "PaymentRepository",
    "UserDirectoryRepository",
]
