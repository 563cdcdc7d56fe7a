"""API Route Registry package.

This package implements the Route Metadata Registry pattern for API routes.
The registry is the single source of truth for all routes, generating FastAPI
routes and OpenAPI metadata.

Modules:
    metadata: Core types (RouteMetadata, HTTPMethod, ErrorSpec, IdempotencyLevel)
    registry: ROUTE_REGISTRY - List of all route declarations
    generator: register_routes_from_registry() - Generate FastAPI routes
"""

from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "RouteMetadata",
    "HTTPMethod",
    "ErrorSpec",
    "IdempotencyLevel",
]
