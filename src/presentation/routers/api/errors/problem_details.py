"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Two extension members are added to the standard ones: `code`, the
machine-readable domain error code, and `details`, the metadata the
domain attached to the error.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="end_date",
        ...     code="invalid_date_range",
        ...     message="End date must not be before start date",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Domain error code (e.g. "equipment_not_available")
        details: Domain error metadata
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:3000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Rental has already been returned",
        ...     instance="/api/rentals/0192f7a0-.../return",
        ...     code="rental_already_returned",
        ...     trace_id="0192f7a0-7c1e-7d4a-9c55-0c3f1e1c2b11",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:3000/errors/not_found"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Resource Not Found"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[404],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Equipment 0192f7a0-... not found"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/equipment/0192f7a0-..."],
    )
    code: str | None = Field(
        None,
        description="Machine-readable domain error code",
        examples=["equipment_not_found"],
    )
    details: dict[str, str] | None = Field(
        None,
        description="Domain error metadata",
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
