"""API Route Registry package.

The registry is the single source of truth for all resource routes. Each
entry declares method, path, endpoint function and OpenAPI metadata; the
generator turns entries into FastAPI routes at startup.

Modules:
    metadata: Core types (RouteMetadata, HTTPMethod, ErrorSpec, IdempotencyLevel)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    # Metadata types
    "RouteMetadata",
    "HTTPMethod",
    "ErrorSpec",
    "IdempotencyLevel",
]
