"""Key-value service for cache reads and writes.

Command and connection failures surface as CacheError instead of
escaping the request handler.
"""

from datastore_api.errors import CacheError
from datastore_api.protocols import KeyValueStore


class KeyValueService:
    """Cache orchestration over a KeyValueStore.

    Example:
        ```python
        from datastore_api.repositories import RedisKeyValueRepository
        from datastore_api.services import KeyValueService

        cache = KeyValueService.create(RedisKeyValueRepository.create())
        await cache.set("greeting", "hello")
        await cache.get("greeting")  # "hello"
        ```
    """

    def __init__(self, repository: KeyValueStore) -> None:
        """Initialize the key-value service.

        Args:
            repository: Cache storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: KeyValueStore) -> "KeyValueService":
        """Factory method to create KeyValueService."""
        return cls(repository=repository)

    async def get(self, key: str) -> str | None:
        """Look up a key.

        Args:
            key: The cache key

        Returns:
            The stored value, or None when the key is absent

        Raises:
            CacheError: If the cache could not be queried
        """
        try:
            return await self._repository.get(key)
        except Exception as e:
            raise CacheError(str(e) or type(e).__name__) from e

    async def set(self, key: str, value: str) -> bool:
        """Store a value, replacing whatever the key held before.

        Args:
            key: The cache key
            value: The value to store

        Returns:
            True when the write was acknowledged

        Raises:
            CacheError: If the cache could not be written
        """
        try:
            acknowledged = await self._repository.set(key, value)
        except Exception as e:
            raise CacheError(str(e) or type(e).__name__) from e

        if not acknowledged:
            raise CacheError(f"write of key {key!r} was not acknowledged")
        return acknowledged

    async def is_healthy(self) -> bool:
        """Check if the cache backend is reachable."""
        return await self._repository.health_check()

    @property
    def repository(self) -> KeyValueStore:
        """Get the underlying repository (for testing)."""
        return self._repository
