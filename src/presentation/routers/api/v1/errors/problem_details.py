"""RFC 9457 Problem Details for HTTP APIs.

This module implements RFC 9457 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Used for validation errors where multiple fields may have errors.

    Examples:
        >>> error = ErrorDetail(
        ...     field="notes",
        ...     code="value_too_long",
        ...     message="notes must be at most 500 characters",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Domain error code (extension member)
        errors: Optional list of field-specific errors (for validation failures)
        details: Optional error context, e.g. the id of a payment left failed
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://api.eventhub.local/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="User is already registered for this event",
        ...     instance="/api/v1/attendances",
        ...     code="attendance_already_registered",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.eventhub.local/errors/not_found"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Resource Not Found"])
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    code: str | None = Field(None, description="Machine-readable domain error code")
    errors: list[ErrorDetail] | None = Field(None, description="List of field-specific errors")
    details: dict[str, Any] | None = Field(None, description="Additional error context")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
