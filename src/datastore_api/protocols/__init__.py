"""Protocol interfaces for swappable collaborators.

Protocols use structural typing, so the API layers depend on these
interfaces rather than on asyncpg or redis directly. Tests install
in-memory implementations in their place.

Usage:
    ```python
    from datastore_api.protocols import KeyValueStore, UserStore

    users: UserStore = PostgresUserRepository.create()
    cache: KeyValueStore = RedisKeyValueRepository.create()
    ```
"""

from .key_value_store import KeyValueStore
from .user_store import UserStore

__all__ = [
    "KeyValueStore",
    "UserStore",
]
