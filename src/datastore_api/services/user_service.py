"""User service: pass-through reads of the users table."""

from typing import Any

from datastore_api.errors import DatabaseError
from datastore_api.protocols import UserStore


class UserService:
    """Reads users from a UserStore and normalizes failures.

    Rows are returned exactly as the store produced them.
    """

    def __init__(self, repository: UserStore) -> None:
        self._repository = repository

    @classmethod
    def create(cls, repository: UserStore) -> "UserService":
        """Factory method mirroring the repository factories."""
        return cls(repository=repository)

    async def list_users(self) -> list[dict[str, Any]]:
        """Return every user row.

        Raises:
            DatabaseError: If the query could not be executed
        """
        try:
            return await self._repository.fetch_all_users()
        except Exception as e:
            raise DatabaseError(str(e) or type(e).__name__) from e

    async def is_healthy(self) -> bool:
        return await self._repository.health_check()

    @property
    def repository(self) -> UserStore:
        """Get the underlying repository (for testing)."""
        return self._repository
