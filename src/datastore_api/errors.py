"""Errors raised when a collaborator call fails.

Services translate driver exceptions (asyncpg, redis, socket errors) into
these so the HTTP layer maps failures without importing driver packages.
"""


class CollaboratorError(RuntimeError):
    """A call to an external collaborator failed."""

    public_message = "Collaborator unavailable"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class DatabaseError(CollaboratorError):
    """The relational database rejected or could not run a query."""

    public_message = "Failed to fetch users"


class CacheError(CollaboratorError):
    """The key-value cache could not be reached or rejected a command."""

    public_message = "Cache unavailable"
