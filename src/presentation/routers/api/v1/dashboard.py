"""Admin dashboard handler.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.dashboard_queries import GetAdminDashboard
from src.application.queries.handlers.get_admin_dashboard_handler import (
    GetAdminDashboardHandler,
)
from src.core.container import get_admin_dashboard_handler
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.dashboard_schemas import AdminDashboardResponse


async def get_admin_dashboard(
    request: Request,
    top_organizers_limit: Annotated[
        int | None,
        Query(description="Number of organizers to rank (default from settings)"),
    ] = None,
    handler: GetAdminDashboardHandler = Depends(get_admin_dashboard_handler),
) -> AdminDashboardResponse | JSONResponse:
    """Platform-wide statistics.

    GET /api/v1/dashboard/admin → 200 OK
    """
    result = await handler.handle(
        GetAdminDashboard(top_organizers_limit=top_organizers_limit)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AdminDashboardResponse.from_dto(result.value)
