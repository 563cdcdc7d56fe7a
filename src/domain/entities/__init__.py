"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.attendance import Attendance
from src.domain.entities.event_summary import EventSummary
from src.domain.entities.payment import Payment
from src.domain.entities.user_summary import UserSummary

__all__ = [
    "Attendance",
    "EventSummary",
    "Payment",
    "UserSummary",
]
