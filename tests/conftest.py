"""Shared fixtures: in-memory collaborators and an app wired to them."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from datastore_api.api.app import create_app
from datastore_api.handlers import ApiHandler
from datastore_api.services import KeyValueService, UserService


class InMemoryUserStore:
    """UserStore backed by a list; can simulate an outage."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = list(rows or [])
        self.down = False

    async def fetch_all_users(self) -> list[dict[str, Any]]:
        if self.down:
            raise ConnectionRefusedError("connection to server at db:5432 refused")
        return [dict(row) for row in self.rows]

    async def health_check(self) -> bool:
        return not self.down


class InMemoryKeyValueStore:
    """KeyValueStore backed by a dict; can simulate an outage."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.down = False

    async def get(self, key: str) -> str | None:
        if self.down:
            raise ConnectionError("Error connecting to cache:6379")
        return self.data.get(key)

    async def set(self, key: str, value: str) -> bool:
        if self.down:
            raise ConnectionError("Error connecting to cache:6379")
        self.data[key] = value
        return True

    async def health_check(self) -> bool:
        return not self.down


@pytest.fixture
def user_store():
    """Empty users table."""
    return InMemoryUserStore()


@pytest.fixture
def kv_store():
    """Empty cache."""
    return InMemoryKeyValueStore()


def _build_client(
    user_store,
    kv_store,
    expose_error_details: bool = False,
    raise_server_exceptions: bool = True,
) -> TestClient:
    app = create_app(lifespan=None)
    app.state.api_handler = ApiHandler(
        user_service=UserService.create(repository=user_store),
        key_value_service=KeyValueService.create(repository=kv_store),
        expose_error_details=expose_error_details,
    )
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


@pytest.fixture
def client(user_store, kv_store):
    """Create a test client wired to the in-memory collaborators."""
    return _build_client(user_store, kv_store)


@pytest.fixture
def client_factory():
    """Build clients over given stores, e.g. with error details exposed."""
    return _build_client
