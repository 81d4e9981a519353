"""Data Transfer Objects for API contracts.

These Pydantic models define the external JSON bodies. User rows are not
modelled: their shape belongs to the database schema and they pass through
as plain dicts.
"""

from .responses import (
    CacheValueResponse,
    CacheWriteResponse,
    ErrorResponse,
    HealthCheckResponse,
    WelcomeResponse,
)

__all__ = [
    "CacheValueResponse",
    "CacheWriteResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "WelcomeResponse",
]
