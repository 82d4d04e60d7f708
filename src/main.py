"""
Main FastAPI application entry point.

Builds the application instance: lifespan (schema bootstrap and database
shutdown), trace middleware, CORS, RFC 7807 exception handlers, and the
system and resource routers.

Run locally:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables in development/testing (migrations elsewhere)
    - Shutdown: Dispose of the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development or settings.is_testing:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        database_dialect=database.dialect,
    )

    yield

    await database.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Equipment rental management: inventory, members, rentals and reservations",
    version=settings.app_version,
    docs_url="/api-docs",
    redoc_url=None,
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id"],
    )

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
