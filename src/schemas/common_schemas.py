"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: "healthy" when the database answers, "degraded" otherwise.
        database: "connected" or "disconnected".
    """

    status: str = Field(..., description="Overall status", examples=["healthy"])
    database: str = Field(..., description="Database status", examples=["connected"])
