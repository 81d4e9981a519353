"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing collaborator handles.

Pattern:
    - Pool, client and handler created once in the lifespan
    - Dependency functions retrieve them from request.app.state
    - No global mutable state; tests install fakes on app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from datastore_api.config import configure_logging, settings
from datastore_api.handlers import ApiHandler
from datastore_api.repositories import PostgresUserRepository, RedisKeyValueRepository
from datastore_api.services import KeyValueService, UserService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ApiHandler:
    """Dependency injection for ApiHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ApiHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "api_handler", None)
    if handler is None:
        raise RuntimeError("ApiHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Opens both collaborators and stores the layers in app.state:
    1. Repositories (asyncpg pool, Redis client)
    2. Services wrapping them
    3. Handler in app.state.api_handler

    A collaborator that cannot be reached at startup is logged and the app
    still starts; the database pool is opened again on first use.
    """
    configure_logging()
    logger.info("Database: %s", settings.database_target)
    logger.info("Redis URL: %s", settings.redis_url)

    user_repository = PostgresUserRepository.create(settings)
    key_value_repository = RedisKeyValueRepository.create(settings)

    try:
        await user_repository.connect()
    except Exception:
        logger.exception("PostgreSQL connection failed, will retry on first request")

    if await key_value_repository.health_check():
        logger.info("Redis connection successful")
    else:
        logger.error("Redis connection failed: %s unreachable", settings.redis_url)

    user_service = UserService.create(repository=user_repository)
    key_value_service = KeyValueService.create(repository=key_value_repository)

    app.state.user_repository = user_repository
    app.state.key_value_repository = key_value_repository
    app.state.api_handler = ApiHandler(
        user_service=user_service,
        key_value_service=key_value_service,
    )

    yield

    del app.state.api_handler
    del app.state.key_value_repository
    del app.state.user_repository
    await key_value_repository.close()
    await user_repository.close()
    logger.info("Shut down datastore API")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[ApiHandler, Depends(get_handler)]
