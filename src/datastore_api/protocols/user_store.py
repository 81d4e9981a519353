"""User storage protocol.

Defines the interface for the relational backend that owns the ``users``
table. Rows are opaque: their shape belongs to the database schema.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UserStore(Protocol):
    """Protocol for the user table backend.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from datastore_api.protocols import UserStore

        repo: UserStore = PostgresUserRepository.create()
        repo: UserStore = InMemoryUserStore([{"id": 1}])
        ```
    """

    async def fetch_all_users(self) -> list[dict[str, Any]]:
        """Fetch every row of the users table.

        Returns:
            Rows as mappings of column name to value, in query order
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
