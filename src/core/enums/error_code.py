"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_*, *_CONFLICT)
- State machine violations (INVALID_STATE_TRANSITION)
- Payment processor errors (PAYMENT_PROCESSOR_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    INVALID_DATE_RANGE = "invalid_date_range"
    VALUE_TOO_LONG = "value_too_long"
    PAYMENT_ALREADY_REFUNDED = "payment_already_refunded"
    PAYMENT_NOT_REFUNDABLE = "payment_not_refundable"

    # Resource errors
    ATTENDANCE_NOT_FOUND = "attendance_not_found"
    PAYMENT_NOT_FOUND = "payment_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    ATTENDANCE_ALREADY_REGISTERED = "attendance_already_registered"
    ATTENDANCE_ALREADY_CANCELLED = "attendance_already_cancelled"
    CONCURRENT_MODIFICATION = "concurrent_modification"
    RESOURCE_CONFLICT = "resource_conflict"

    # State machine violations
    INVALID_STATE_TRANSITION = "invalid_state_transition"

    # Payment processor errors
    PAYMENT_PROCESSOR_UNAVAILABLE = "payment_processor_unavailable"
    PAYMENT_PROCESSOR_REJECTED = "payment_processor_rejected"
    PAYMENT_PROCESSOR_ERROR = "payment_processor_error"
    PAYMENT_PROVIDER_UNSUPPORTED = "payment_provider_unsupported"
