"""Route metadata types for the API Route Registry.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/rentals",
        handler=create_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Create rental",
        response_model=CreateRentalResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations and batch triggers
        PUT: Idempotent state transitions and updates
        DELETE: Idempotent removal (reservation cancellation)
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry

    Reference:
        - RFC 7231 Section 4.2 (HTTP Semantics)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 409)
        description: Human-readable error description

    Examples:
        >>> ErrorSpec(status=404, description="Rental not found")
        >>> ErrorSpec(status=402, description="Payment declined")
    """

    status: int
    description: str


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the API prefix (e.g., "/rentals/{rental_id}")
        handler: Async endpoint function

    Grouping fields:
        resource: Resource category (e.g., "rentals")
        tags: OpenAPI tags (e.g., ["Rentals"])

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (200 or 201)
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
