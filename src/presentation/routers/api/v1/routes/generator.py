"""Build FastAPI routes from ROUTE_REGISTRY.

Routes are added in registry order, so literal paths such as
``/payments/stats`` must be declared before ``/payments/{payment_id}``.
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.v1.errors.error_response_builder import PROBLEM_JSON
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one route per registry entry to ``router``."""
    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors or []),
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` for documented error statuses.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Payment not found")])
        {404: {"description": "Payment not found", "model": ProblemDetails, ...}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": ProblemDetails,
            "content": {PROBLEM_JSON: {}},
        }
        for error in errors
    }
