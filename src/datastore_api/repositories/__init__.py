"""Repository layer for data access.

This layer wraps the collaborators' client libraries (asyncpg, redis)
behind the protocol interfaces in ``datastore_api.protocols``. This enables:
- Unit testing with in-memory implementations
- Keeping driver specifics out of services and handlers

The repositories are protocol-based (structural typing), not inheritance-based.
"""

from datastore_api.protocols import KeyValueStore, UserStore

from .postgres_repository import PostgresUserRepository
from .redis_repository import RedisKeyValueRepository

__all__ = [
    "KeyValueStore",
    "UserStore",
    "PostgresUserRepository",
    "RedisKeyValueRepository",
]
