import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any
from urllib.parse import unquote

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from datastore_api.api.dependencies import HandlerDep, lifespan
from datastore_api.config import configure_logging, settings
from datastore_api.dto import (
    CacheValueResponse,
    CacheWriteResponse,
    ErrorResponse,
    HealthCheckResponse,
    WelcomeResponse,
)

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    500: {"model": ErrorResponse, "description": "Database failure"},
    502: {"model": ErrorResponse, "description": "Cache failure"},
}

CACHE_PREFIX = "/cache/"

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures with the same error body."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def cache_path_segments(request: Request, count: int) -> list[str]:
    """Split the undecoded path after ``/cache/`` into decoded segments.

    The routing path is already percent-decoded, so ``%2F`` inside a key
    or value would look like a separator. Splitting the raw path first
    keeps such keys and values intact.

    Raises:
        HTTPException: 404 unless there are exactly ``count`` non-empty segments
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1")
        root_path = request.scope.get("root_path", "")
        if root_path and path.startswith(root_path):
            path = path[len(root_path):]
    else:
        path = request.url.path

    segments = path[len(CACHE_PREFIX):].split("/") if path.startswith(CACHE_PREFIX) else []
    if len(segments) != count or not all(segments):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return [unquote(segment) for segment in segments]


def create_app(lifespan: Lifespan | None = lifespan) -> FastAPI:
    """Build the FastAPI application.

    Args:
        lifespan: Lifespan context manager. Pass None to build an app whose
            app.state is populated by the caller (tests).

    Returns:
        The configured FastAPI application
    """
    app = FastAPI(
        title="Datastore API",
        description="Pass-through HTTP API over PostgreSQL and Redis",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", response_model=WelcomeResponse)
    async def root(handler: HandlerDep) -> WelcomeResponse:
        """Fixed welcome message."""
        return await handler.welcome()

    @app.get("/users", responses={500: ERROR_RESPONSES[500]})
    async def list_users(handler: HandlerDep) -> list[dict[str, Any]]:
        """Every row of the users table, unchanged."""
        return await handler.list_users()

    @app.get(
        "/cache/{key:path}",
        response_model=CacheValueResponse,
        responses={502: ERROR_RESPONSES[502]},
    )
    async def get_cache_value(request: Request, handler: HandlerDep) -> CacheValueResponse:
        """Read a key; value is null when the key does not exist."""
        (key,) = cache_path_segments(request, 1)
        return await handler.get_cache_value(key)

    @app.post(
        "/cache/{key:path}",
        response_model=CacheWriteResponse,
        responses={502: ERROR_RESPONSES[502]},
    )
    async def set_cache_value(request: Request, handler: HandlerDep) -> CacheWriteResponse:
        """Store ``/cache/{key}/{value}``, overwriting any prior value."""
        key, value = cache_path_segments(request, 2)
        return await handler.set_cache_value(key, value)

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        responses={503: {"model": HealthCheckResponse}},
    )
    async def health(handler: HandlerDep) -> JSONResponse:
        """Collaborator reachability."""
        code, body = await handler.health_check()
        return JSONResponse(status_code=code, content=body.model_dump())

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging()
    logger.info("API running on port %s", settings.api_port)
    uvicorn.run(
        "datastore_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
