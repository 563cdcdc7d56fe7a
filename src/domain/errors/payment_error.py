"""Payment domain errors.

Error message constants for payment state transitions and validation.
Never raised as exceptions; returned inside Failure values.
"""


class PaymentError:
    """Payment error constants.

    Error Categories:
        - State transition errors: CANNOT_*
        - Refund rules: ALREADY_REFUNDED, ONLY_COMPLETED_REFUNDABLE
        - Validation errors: INVALID_*, *_REQUIRED
    """

    # State transition errors
    CANNOT_COMPLETE = "Only pending payments can be completed"
    CANNOT_FAIL = "Only pending payments can be marked as failed"
    CANNOT_CANCEL = "Only pending payments can be cancelled"
    CANNOT_PROCESS = "Only pending payments can be processed"

    # Refund rules
    ALREADY_REFUNDED = "Payment has already been refunded"
    ONLY_COMPLETED_REFUNDABLE = "Only completed payments may be refunded"

    # Validation errors
    INVALID_AMOUNT = "Payment amount must be greater than zero"
    PROVIDER_PAYMENT_ID_REQUIRED = "Completed payments require a provider payment id"
    DESCRIPTION_TOO_LONG = "Description must be at most 500 characters"

    # Lookup / conflict errors
    NOT_FOUND = "Payment not found"
    CONCURRENT_MODIFICATION = "Payment was concurrently modified"
