"""Application layer errors.

ApplicationError wraps the DomainError returned by a handler and classifies
it (not found, conflict, invalid state, processor failure) so routers can
pick the HTTP status. Domain error builders shared by several lifecycle
handlers live in ``lifecycle_errors``.
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]
