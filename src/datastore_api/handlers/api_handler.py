"""HTTP handlers for the pass-through routes.

Handlers convert service results into DTOs and collaborator errors into
HTTPException with the matching status code.
"""

import base64
import logging
from typing import Any

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder

from datastore_api.config import settings
from datastore_api.dto import (
    CacheValueResponse,
    CacheWriteResponse,
    HealthCheckResponse,
    WelcomeResponse,
)
from datastore_api.errors import CollaboratorError
from datastore_api.services import KeyValueService, UserService

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the API"

# bytea columns arrive as bytes and are not necessarily UTF-8
ROW_ENCODERS = {
    bytes: lambda value: base64.b64encode(value).decode("ascii"),
}


class ApiHandler:
    """HTTP handlers for the API routes.

    This handler delegates collaborator calls to the services
    and handles HTTP-specific concerns like:
    - Converting results to DTOs
    - Setting appropriate status codes
    - Deciding how much of a failure is shown to the client

    Example:
        ```python
        handler = ApiHandler(user_service=users, key_value_service=cache)

        @app.get("/users")
        async def list_users():
            return await handler.list_users()
        ```
    """

    def __init__(
        self,
        user_service: UserService,
        key_value_service: KeyValueService,
        expose_error_details: bool | None = None,
    ) -> None:
        """Initialize the API handler.

        Args:
            user_service: Service for the users table (required).
            key_value_service: Service for the cache (required).
            expose_error_details: Include raw collaborator error text in
                responses. Defaults to settings.
        """
        self._users = user_service
        self._cache = key_value_service
        if expose_error_details is None:
            expose_error_details = settings.expose_error_details
        self._expose_error_details = expose_error_details

    def _failure(self, status_code: int, error: CollaboratorError) -> HTTPException:
        logger.error("%s: %s", error.public_message, error.detail, exc_info=error)
        message = error.public_message
        if self._expose_error_details:
            message = f"{message}: {error.detail}"
        return HTTPException(status_code=status_code, detail=message)

    async def welcome(self) -> WelcomeResponse:
        """Handle GET / requests."""
        return WelcomeResponse(message=WELCOME_MESSAGE)

    async def list_users(self) -> list[dict[str, Any]]:
        """Handle GET /users requests.

        Returns:
            Every row of the users table as JSON-ready dicts; bytes
            values are base64 encoded

        Raises:
            HTTPException: 500 if the database query fails
        """
        try:
            rows = await self._users.list_users()
        except CollaboratorError as e:
            raise self._failure(status.HTTP_500_INTERNAL_SERVER_ERROR, e) from e

        return jsonable_encoder(rows, custom_encoder=ROW_ENCODERS)

    async def get_cache_value(self, key: str) -> CacheValueResponse:
        """Handle GET /cache/{key} requests.

        Args:
            key: The cache key from the path

        Returns:
            CacheValueResponse with the value, or null if absent

        Raises:
            HTTPException: 502 if the cache cannot be read
        """
        try:
            value = await self._cache.get(key)
        except CollaboratorError as e:
            raise self._failure(status.HTTP_502_BAD_GATEWAY, e) from e

        return CacheValueResponse(key=key, value=value)

    async def set_cache_value(self, key: str, value: str) -> CacheWriteResponse:
        """Handle POST /cache/{key}/{value} requests.

        Args:
            key: The cache key from the path
            value: The value from the path

        Returns:
            CacheWriteResponse confirming the write

        Raises:
            HTTPException: 502 if the cache cannot be written
        """
        try:
            await self._cache.set(key, value)
        except CollaboratorError as e:
            raise self._failure(status.HTTP_502_BAD_GATEWAY, e) from e

        return CacheWriteResponse(success=True)

    async def health_check(self) -> tuple[int, HealthCheckResponse]:
        """Handle GET /health requests.

        Returns:
            Status code and health body; 503 when any collaborator is down
        """
        database_ok = await self._users.is_healthy()
        cache_ok = await self._cache.is_healthy()
        healthy = database_ok and cache_ok

        body = HealthCheckResponse(
            status="healthy" if healthy else "unhealthy",
            database=database_ok,
            cache=cache_ok,
        )
        code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        return code, body
