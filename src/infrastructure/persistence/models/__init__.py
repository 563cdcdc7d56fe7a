"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from src.infrastructure.persistence.models.attendance import Attendance
from src.infrastructure.persistence.models.event import Event
from src.infrastructure.persistence.models.payment import Payment
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Attendance",
    "Event",
    "Payment",
    "User",
]
