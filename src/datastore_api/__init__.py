"""Datastore API - pass-through HTTP access to PostgreSQL and Redis.

Layers:
    - protocols: Interface contracts (UserStore, KeyValueStore)
    - repositories: asyncpg and redis implementations
    - services: Collaborator calls and error translation
    - handlers: HTTP endpoint handlers
    - dto: Response models (API contracts)

Usage:
    ```python
    from datastore_api.api.app import app
    ```

Or run the server:
    ```
    python -m datastore_api
    ```
"""

from datastore_api.config import get_redis_client, get_settings, settings
from datastore_api.errors import CacheError, CollaboratorError, DatabaseError
from datastore_api.handlers import ApiHandler
from datastore_api.protocols import KeyValueStore, UserStore
from datastore_api.repositories import PostgresUserRepository, RedisKeyValueRepository
from datastore_api.services import KeyValueService, UserService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    "get_redis_client",
    # Errors
    "CollaboratorError",
    "DatabaseError",
    "CacheError",
    # Protocols (interfaces)
    "UserStore",
    "KeyValueStore",
    # Services
    "UserService",
    "KeyValueService",
    # Handlers (HTTP)
    "ApiHandler",
    # Repositories (data access)
    "PostgresUserRepository",
    "RedisKeyValueRepository",
]
