"""Pytest configuration and fixtures for gencache.

Redis is replaced by fakeredis (one private server per test) so tests
exercise real GET/SET/EX semantics without a running Redis.
"""

import itertools
from collections.abc import Callable

import fakeredis
import pytest

from gencache.core.config import get_settings
from gencache.domain.value_objects import Namespace
from gencache.infrastructure.cache.generational_cache import GenerationalCache


_SETTINGS_ENV_VARS = (
    "DEBUG",
    "ENVIRONMENT",
    "CACHE_TTLS",
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_PASSWORD",
    "REDIS_PARTITIONS",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Settings are cached per process; reset around each test with a clean env."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> fakeredis.aioredis.FakeRedis:
    """Async fake Redis with decoded responses and an isolated keyspace."""
    return fakeredis.aioredis.FakeRedis(
        server=fakeredis.FakeServer(), decode_responses=True
    )


@pytest.fixture
def clock() -> Callable[[], int]:
    """Deterministic generation source: 1000, 1001, 1002, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture
def cache(store, clock) -> GenerationalCache:
    """GenerationalCache over the fake store with a short-lived test type."""
    return GenerationalCache(
        store, ttls={"post_statistic": 60, "default": 3600}, clock=clock
    )


@pytest.fixture
def namespace() -> Namespace:
    return Namespace("project-1", "post")
