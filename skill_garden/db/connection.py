"""Database connection management"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import psycopg
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from skill_garden.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Database:
    """Database connection pool manager"""

    def __init__(self, connection_string: Optional[str] = None):
        self.connection_string = connection_string
        self._pool: Optional[AsyncConnectionPool] = None

    async def init_pool(self, connection_string: Optional[str] = None) -> None:
        """Initialize connection pool"""
        if connection_string:
            self.connection_string = connection_string
        if not self.connection_string:
            raise ConfigurationError("Database connection string not configured", config_key="DATABASE_URL")

        logger.info("Initializing database connection pool")
        self._pool = AsyncConnectionPool(
            self.connection_string,
            min_size=2,
            max_size=10,
            open=False
        )
        await self._pool.open()

    async def close_pool(self) -> None:
        """Close connection pool"""
        if self._pool:
            logger.info("Closing database connection pool")
            await self._pool.close()
            self._pool = None

    @property
    def is_initialized(self) -> bool:
        return self._pool is not None

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[psycopg.AsyncConnection, None]:
        """Get database connection from pool"""
        if not self._pool:
            raise RuntimeError("Database pool not initialized")

        async with self._pool.connection() as conn:
            conn.row_factory = dict_row
            yield conn

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[psycopg.AsyncConnection, None]:
        """
        Get a connection inside a single transaction.

        Commits when the block exits normally, rolls back on exception.
        Row locks taken with SELECT ... FOR UPDATE are held until then.
        """
        async with self.connection() as conn:
            async with conn.transaction():
                yield conn

    async def check_connection(self) -> bool:
        """Return True if a trivial query succeeds"""
        if not self.is_initialized:
            return False
        try:
            async with self.connection() as conn:
                await conn.execute("SELECT 1")
            return True
        except psycopg.Error as e:
            logger.error(f"Database health check failed: {e}")
            return False


# Global database instance, configured by the API lifespan
db = Database()
