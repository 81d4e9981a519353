"""Redis implementation of KeyValueStore.

Plain GET/SET on string keys. Values are stored without expiry and a SET
always overwrites.
"""

import logging

import redis.asyncio as redis

from datastore_api.config import Settings, get_redis_client

logger = logging.getLogger(__name__)


class RedisKeyValueRepository:
    """Redis implementation using plain string commands.

    This class satisfies the KeyValueStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis key-value repository.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, config: Settings | None = None) -> "RedisKeyValueRepository":
        """Factory method to create RedisKeyValueRepository with defaults.

        Args:
            config: Settings to build the client from. If None, uses the
                process settings.

        Returns:
            Configured RedisKeyValueRepository
        """
        return cls(redis_client=get_redis_client(config))

    async def get(self, key: str) -> str | None:
        """Read a value from Redis.

        Args:
            key: The cache key

        Returns:
            The stored string, or None if the key does not exist
        """
        return await self._client.get(key)

    async def set(self, key: str, value: str) -> bool:
        """Store a value in Redis, overwriting any prior value.

        Args:
            key: The cache key
            value: The value to store

        Returns:
            True if Redis acknowledged the write
        """
        result = await self._client.set(key, value)
        return bool(result)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except Exception:
            logger.debug("Redis health check failed", exc_info=True)
            return False

    async def close(self) -> None:
        """Close the client and release its connections."""
        await self._client.aclose()
        logger.info("Closed Redis client")

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
