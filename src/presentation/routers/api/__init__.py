"""Resource API router.

Routes are generated from ROUTE_REGISTRY onto a single router mounted
under the configured API prefix.

Exports:
    api_router: APIRouter with all resource routes registered
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.routes.generator import register_routes_from_registry
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

api_router = APIRouter(prefix=settings.api_prefix)
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = ["api_router"]
