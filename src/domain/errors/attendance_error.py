"""Attendance domain errors.

Error message constants for attendance state transitions and validation.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import AttendanceError

    result = attendance.check_in()
    match result:
        case Failure(AttendanceError.CANNOT_CHECK_IN):
            ...
"""


class AttendanceError:
    """Attendance error constants.

    Error Categories:
        - State transition errors: CANNOT_*
        - Validation errors: NOTES_TOO_LONG, CHECK_OUT_BEFORE_CHECK_IN
        - Conflict errors: ALREADY_REGISTERED, ALREADY_CANCELLED
    """

    # State transition errors
    CANNOT_CHECK_IN = "Only registered attendances can be checked in"
    CANNOT_CHECK_OUT = "Only checked-in attendances can be checked out"
    CANNOT_CANCEL = "Attendance is already cancelled"
    INVALID_STATUS_TRANSITION = "Status transition is not allowed"

    # Validation errors
    NOTES_TOO_LONG = "Notes must be at most 500 characters"
    CHECK_OUT_WITHOUT_CHECK_IN = "Check-out time requires a check-in time"
    CHECK_OUT_BEFORE_CHECK_IN = "Check-out time cannot precede check-in time"

    # Lookup / conflict errors
    NOT_FOUND = "Attendance not found"
    NOT_REGISTERED = "User is not registered for this event"
    ALREADY_REGISTERED = "User is already registered for this event"
    ALREADY_CANCELLED = "Attendance is already cancelled"
    CONCURRENT_MODIFICATION = "Attendance was concurrently modified"
