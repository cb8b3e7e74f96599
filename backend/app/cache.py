"""Redis connection pool & per-request client.

The client is handed to every file handler and released afterwards, but no
handler reads from or writes to it yet.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator

import redis.asyncio as redis
from fastapi import Request

from app.config import Settings

logger = logging.getLogger(__name__)


def create_cache_pool(settings: Settings) -> redis.ConnectionPool:
    """Build the pool lazily; no connection is opened until a command runs."""
    return redis.ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis_max_connections,
        decode_responses=True,
    )


async def close_cache_pool(pool: redis.ConnectionPool) -> None:
    await pool.disconnect()
    logger.info("Cache connection pool closed")


async def get_cache(request: Request) -> AsyncGenerator[redis.Redis, None]:
    """FastAPI dependency — yields a Redis client bound to the app's pool."""
    client = redis.Redis(connection_pool=request.app.state.cache_pool)
    try:
        yield client
    finally:
        await client.aclose()
