"""System router for non-resource application endpoints.

Provides root and health endpoints outside the API prefix for load
balancers and basic diagnostics.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.schemas.common_schemas import HealthResponse


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
async def health() -> HealthResponse | JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        HealthResponse: "healthy" with the database connected, otherwise a
            503 with status "unhealthy".
    """
    if await get_database().check_connection():
        return HealthResponse(status="healthy", database="connected")

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=HealthResponse(status="unhealthy", database="disconnected").model_dump(),
    )
