"""Payment lifecycle states.

State Machine:
    PENDING → COMPLETED → REFUNDED
       ↓  ↘
    FAILED  CANCELLED

    - PENDING: Created, awaiting processor confirmation (initial)
    - COMPLETED: Processor confirmed the charge
    - FAILED: Processor rejected the charge or errored (terminal)
    - REFUNDED: Completed payment returned to the payer (terminal)
    - CANCELLED: Abandoned before confirmation (terminal)

Usage:
    from src.domain.enums import PaymentStatus

    if payment.status.can_transition_to(PaymentStatus.REFUNDED):
        ...
"""

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.

    State Transitions:
        PENDING → COMPLETED: Processor confirmed
        PENDING → FAILED: Processor rejected or raised
        PENDING → CANCELLED: Purchase abandoned
        COMPLETED → REFUNDED: Refund issued
    """

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"

    def allowed_transitions(self) -> frozenset["PaymentStatus"]:
        """Get the states reachable from this state in one step.

        Returns:
            frozenset[PaymentStatus]: Legal target states.
        """
        match self:
            case PaymentStatus.PENDING:
                return frozenset(
                    {
                        PaymentStatus.COMPLETED,
                        PaymentStatus.FAILED,
                        PaymentStatus.CANCELLED,
                    }
                )
            case PaymentStatus.COMPLETED:
                return frozenset({PaymentStatus.REFUNDED})
            case PaymentStatus.FAILED | PaymentStatus.REFUNDED | PaymentStatus.CANCELLED:
                return frozenset()

    def can_transition_to(self, target: "PaymentStatus") -> bool:
        """Check whether moving to ``target`` is a legal transition."""
        return target in self.allowed_transitions()

    @property
    def counts_as_revenue(self) -> bool:
        """Only completed payments contribute to revenue figures."""
        return self is PaymentStatus.COMPLETED

    @classmethod
    def parse(cls, value: "str | PaymentStatus") -> "PaymentStatus":
        """Parse a raw status string.

        Raises:
            ValueError: If value is not a known status. There is no default.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        raise ValueError(f"Invalid payment status: {value!r}")

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status."""
        return value in cls.values()

    @classmethod
    def terminal_states(cls) -> list["PaymentStatus"]:
        """Get terminal states (no outgoing transitions).

        Returns:
            list[PaymentStatus]: Terminal states.
        """
        return [cls.FAILED, cls.REFUNDED, cls.CANCELLED]
