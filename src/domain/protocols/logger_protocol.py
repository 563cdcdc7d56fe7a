"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe (no secrets such as processor API keys).

Levels used by the lifecycle handlers:
    - INFO: a transition was persisted (attendance registered, payment completed)
    - WARNING: degraded outcome (partial refund failure, forced status override,
      lost compare-and-set race)
    - ERROR: processor failure or unexpected exception

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Attendance registered", attendance_id=str(attendance.id))

    handler_logger = logger.bind(handler="ProcessPaymentHandler")
    handler_logger.warning("Processor rejected payment", payment_id=str(payment.id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Example:
            request_logger = logger.bind(trace_id=trace_id)
            request_logger.info("Request started")  # trace_id included
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
