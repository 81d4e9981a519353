"""PostgreSQL implementation of UserStore.

Rows are read through an asyncpg connection pool that is opened once at
startup and shared by every request. asyncpg uses positional placeholders
($1, $2, ...), but the only query here takes no parameters.
"""

import asyncio
import json
import logging
from typing import Any

import asyncpg

from datastore_api.config import Settings, settings

logger = logging.getLogger(__name__)

SELECT_ALL_USERS = "SELECT * FROM users"


async def _init_connection(connection: asyncpg.Connection) -> None:
    """Decode json and jsonb columns into Python objects instead of text."""
    for type_name in ("json", "jsonb"):
        await connection.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class PostgresUserRepository:
    """asyncpg-backed user table access.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.

    If the pool could not be opened at startup it is opened on first use,
    so the HTTP process can come up before the database does.
    """

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        database: str,
    ) -> None:
        """Initialize the repository without connecting.

        Args:
            host: PostgreSQL host
            port: PostgreSQL port
            user: Role to connect as
            password: Password for the role
            database: Database name
        """
        self._connect_kwargs = {
            "host": host,
            "port": port,
            "user": user,
            "password": password,
            "database": database,
        }
        self._pool: asyncpg.Pool | None = None
        self._pool_lock = asyncio.Lock()

    @classmethod
    def create(cls, config: Settings | None = None) -> "PostgresUserRepository":
        """Factory method to create the repository from settings.

        Args:
            config: Settings to read connection values from. Defaults to the
                process settings.

        Returns:
            Configured PostgresUserRepository (not yet connected)
        """
        config = config or settings
        return cls(
            host=config.db_host,
            port=config.db_port,
            user=config.db_user,
            password=config.db_password,
            database=config.db_name,
        )

    async def connect(self) -> asyncpg.Pool:
        """Open the connection pool. Does nothing if it is already open.

        Returns:
            The open pool
        """
        async with self._pool_lock:
            if self._pool is not None:
                return self._pool
            self._pool = await asyncpg.create_pool(
                init=_init_connection,
                **self._connect_kwargs,
            )
            logger.info(
                "Opened PostgreSQL pool to %s:%s/%s",
                self._connect_kwargs["host"],
                self._connect_kwargs["port"],
                self._connect_kwargs["database"],
            )
            return self._pool

    async def close(self) -> None:
        """Close the connection pool if it is open."""
        async with self._pool_lock:
            if self._pool is None:
                return
            await self._pool.close()
            self._pool = None
            logger.info("Closed PostgreSQL pool")

    async def _get_pool(self) -> asyncpg.Pool:
        pool = self._pool
        if pool is None:
            pool = await self.connect()
        return pool

    async def fetch_all_users(self) -> list[dict[str, Any]]:
        """Fetch every row of the users table.

        Returns:
            Rows as dicts, column order preserved
        """
        pool = await self._get_pool()
        rows = await pool.fetch(SELECT_ALL_USERS)
        return [_record_to_dict(r) for r in rows]

    async def health_check(self) -> bool:
        """Check if PostgreSQL is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            pool = await self._get_pool()
            return await pool.fetchval("SELECT 1") == 1
        except Exception:
            logger.debug("PostgreSQL health check failed", exc_info=True)
            return False

    @property
    def is_connected(self) -> bool:
        """Whether the pool is currently open."""
        return self._pool is not None
