"""API v1 routers.

RESTful resource-based endpoints. All routes are generated from the Route
Metadata Registry (ROUTE_REGISTRY) at startup.

Resources:
    /api/v1/attendances                              - Registrations
    /api/v1/events/{event_id}/attendances[/...]      - Event-scoped attendance lifecycle
    /api/v1/users/{user_id}/attendances              - A user's attendances
    /api/v1/payments[/...]                           - Payment lifecycle and reporting
    /api/v1/users/{user_id}/payments                 - A user's payments
    /api/v1/events/{event_id}/payments               - An event's payments
    /api/v1/dashboard/admin                          - Admin dashboard
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
