"""Redis connection for the generational cache.

Builds the async client from settings. The environment's partition is
applied as the client's logical database (redis-py does not expose
SELECT on pooled connections). Connection errors propagate.
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from gencache.core.config import Settings, get_settings
from gencache.infrastructure.cache.generational_cache import GenerationalCache

logger = logging.getLogger(__name__)


async def connect_store(settings: Settings | None = None) -> redis.Redis:
    """Create a Redis client bound to the environment's partition and ping it.

    Args:
        settings: Optional settings; defaults to get_settings().

    Returns:
        Connected client with decode_responses=True.

    Raises:
        redis.ConnectionError: If Redis is unreachable.
        redis.TimeoutError: If the ping times out.
    """
    settings = settings or get_settings()
    client = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        decode_responses=True,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_connect_timeout,
        socket_keepalive=True,
    )
    try:
        await client.ping()
    except redis.RedisError:
        await client.aclose()
        raise
    logger.info(
        "Redis cache connected: %s:%s db=%s (%s)",
        settings.redis_host,
        settings.redis_port,
        settings.redis_db,
        settings.environment,
    )
    return client


async def close_store(client: redis.Redis) -> None:
    """Close a client created by connect_store."""
    await client.aclose()
    logger.info("Redis cache disconnected")


async def create_cache(settings: Settings | None = None) -> GenerationalCache:
    """Connect to Redis and return a GenerationalCache using settings.cache_ttls."""
    settings = settings or get_settings()
    store = await connect_store(settings)
    return GenerationalCache(store, ttls=settings.cache_ttls)
