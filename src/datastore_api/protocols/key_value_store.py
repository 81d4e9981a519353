"""Key-value storage protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for plain string key/value cache backends.

    Entries have no TTL and no versioning; a write replaces any prior value.
    """

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: The cache key

        Returns:
            The stored value, or None if the key does not exist
        """
        ...

    async def set(self, key: str, value: str) -> bool:
        """Store a value under a key, overwriting any prior value.

        Args:
            key: The cache key
            value: The value to store

        Returns:
            True when the backend acknowledged the write
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable."""
        ...
