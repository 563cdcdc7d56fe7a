"""Route metadata types for the API Route Registry.

Every v1 endpoint is declared once as a RouteMetadata entry in registry.py;
the generator turns entries into FastAPI routes and the compliance tests
check the two never drift apart.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods used by the lifecycle API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"


class IdempotencyLevel(str, Enum):
    """Retry classification of an endpoint (RFC 9110 section 9.2).

    SAFE reads can be retried and cached freely. Every lifecycle write is
    NON_IDEMPOTENT: replaying a check-in, refund or purchase either fails
    on the state machine or creates a second payment.
    """

    SAFE = "safe"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """An error status documented in OpenAPI, rendered as ProblemDetails."""

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Declaration of one API route.

    ``path`` is relative to the version prefix (``/payments/{payment_id}``).
    ``operation_id`` is stable across releases for generated clients.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    resource: str
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str | None = None

    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    idempotency: IdempotencyLevel
