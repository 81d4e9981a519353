"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    """Response DTO for the root endpoint."""

    message: str = Field(..., description="Fixed welcome message")


class CacheValueResponse(BaseModel):
    """Response DTO for a cache read.

    ``value`` is always serialized, as ``null`` when the key is absent.
    """

    key: str = Field(..., description="The requested key")
    value: str | None = Field(..., description="The stored value, or null if the key does not exist")


class CacheWriteResponse(BaseModel):
    """Response DTO for a cache write."""

    success: bool = Field(..., description="Whether the write was acknowledged")


class ErrorResponse(BaseModel):
    """Response DTO for every failed request."""

    error: str = Field(..., description="Human-readable error message", min_length=1)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database: bool = Field(..., description="Whether the database is reachable")
    cache: bool = Field(..., description="Whether the cache is reachable")
