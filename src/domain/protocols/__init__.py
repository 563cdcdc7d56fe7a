"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import AttendanceRepository, PaymentRepository
    from src.domain.protocols import PaymentProcessorProtocol
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_processor_protocol import (
    PaymentProcessorProtocol,
    PaymentProcessorRegistryProtocol,
    ProcessorReceipt,
)

# Repository protocols
from src.domain.protocols.attendance_repository import (
    AttendancePage,
    AttendanceRepository,
)
from src.domain.protocols.event_catalog_protocol import (
    EventCatalogProtocol,
    UserDirectoryProtocol,
)
from src.domain.protocols.payment_repository import PaymentFilter, PaymentRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PaymentProcessorProtocol",
    "PaymentProcessorRegistryProtocol",
    "ProcessorReceipt",
    # Repository protocols
    "AttendancePage",
    "AttendanceRepository",
    "EventCatalogProtocol",
    "PaymentFilter",
    "PaymentRepository",
    "UserDirectoryProtocol",
]
