"""Error response builder for RFC 9457 Problem Details.

This module provides utilities to build RFC 9457 compliant error responses
from handler failures.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import DomainError, ValidationError
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_JSON = "application/problem+json"


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        *,
        is_query: bool = False,
    ) -> JSONResponse:
        """Classify a handler's domain error and render it.

        Args:
            error: Error returned inside a handler Failure.
            request: FastAPI Request object (for instance URL).
            is_query: The failing handler is a query handler.
        """
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError.from_domain_error(error, is_query=is_query),
            request=request,
            trace_id=get_trace_id() or "",
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)
        domain_error = error.domain_error

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            code=domain_error.code.value if domain_error else None,
            details=dict(domain_error.details) if domain_error and domain_error.details else None,
            trace_id=trace_id or None,
        )

        if isinstance(domain_error, ValidationError) and domain_error.field:
            problem.errors = [
                ErrorDetail(
                    field=domain_error.field,
                    code=domain_error.code.value,
                    message=domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(mode="json", exclude_none=True),
            media_type=PROBLEM_JSON,
        )

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(ApplicationErrorCode.INVALID_STATE)
            409
        """
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.QUERY_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
            ApplicationErrorCode.INVALID_STATE: status.HTTP_409_CONFLICT,
            ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
            ApplicationErrorCode.QUERY_VALIDATION_FAILED: "Validation Failed",
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
            ApplicationErrorCode.QUERY_FAILED: "Query Failed",
            ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
            ApplicationErrorCode.CONFLICT: "Resource Conflict",
            ApplicationErrorCode.INVALID_STATE: "Invalid State Transition",
            ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: "External Service Error",
        }
        return mapping.get(code, "Internal Server Error")
