import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import asyncpg
from asyncpg import Connection
from asyncpg.pool import Pool
from fastapi import Request

from app.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class Database:
    """Owns the asyncpg pool; created by the app factory, driven by its lifespan."""

    def __init__(self, config: Settings = default_settings):
        self.config = config
        self.pool: Optional[Pool] = None

    @property
    def is_ready(self) -> bool:
        return self.pool is not None

    async def connect(self) -> None:
        if self.pool is not None:
            return
        try:
            self.pool = await asyncpg.create_pool(
                dsn=self.config.asyncpg_url,
                min_size=self.config.DB_POOL_MIN_SIZE,
                max_size=self.config.DB_POOL_MAX_SIZE,
                timeout=self.config.DB_POOL_TIMEOUT,
            )
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
        except Exception as e:
            logger.error(f"Error connecting to database: {e}")
            await self.close()
            raise
        logger.info("AsyncPG connection pool created successfully.")

    async def close(self) -> None:
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
            logger.info("AsyncPG connection pool closed.")

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection, None]:
        if self.pool is None:
            raise RuntimeError("Database pool is not initialized.")
        async with self.pool.acquire() as connection:
            yield connection


async def get_db_connection(request: Request) -> AsyncGenerator[Connection, None]:
    database: Database = request.app.state.database
    async with database.acquire() as connection:
        yield connection
