"""External-facing routers.

- system: non-versioned endpoints (root, health)
- api.v1: versioned REST API generated from ROUTE_REGISTRY
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
