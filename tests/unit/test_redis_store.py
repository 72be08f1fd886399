"""Tests for Redis client wiring (partition selection, ping, close)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import redis.asyncio as redis
from pydantic import SecretStr

from gencache.core.config import Settings
from gencache.infrastructure.cache.generational_cache import GenerationalCache
from gencache.infrastructure.cache.redis_store import close_store, connect_store, create_cache


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_connect_store_uses_environment_partition(fake_client) -> None:
    settings = Settings(
        _env_file=None,
        environment="test",
        redis_host="cache.internal",
        redis_password=SecretStr("s3cret"),
    )
    with patch(
        "gencache.infrastructure.cache.redis_store.redis.Redis", return_value=fake_client
    ) as redis_cls:
        client = await connect_store(settings)
    assert client is fake_client
    kwargs = redis_cls.call_args.kwargs
    assert kwargs["db"] == 4
    assert kwargs["host"] == "cache.internal"
    assert kwargs["password"] == "s3cret"
    assert kwargs["decode_responses"] is True
    fake_client.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_connect_store_ping_failure_closes_and_raises(fake_client) -> None:
    fake_client.ping.side_effect = redis.ConnectionError("refused")
    with patch(
        "gencache.infrastructure.cache.redis_store.redis.Redis", return_value=fake_client
    ):
        with pytest.raises(redis.ConnectionError):
            await connect_store(Settings(_env_file=None))
    fake_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_store(fake_client) -> None:
    await close_store(fake_client)
    fake_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_cache_uses_configured_ttls(fake_client) -> None:
    settings = Settings(_env_file=None, cache_ttls={"default": 30, "report": 5})
    with patch(
        "gencache.infrastructure.cache.redis_store.redis.Redis", return_value=fake_client
    ):
        cache = await create_cache(settings)
    assert isinstance(cache, GenerationalCache)
    assert cache.store is fake_client
    assert cache.ttl_for("report") == 5
    assert cache.ttl_for("other") == 30
