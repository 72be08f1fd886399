"""Generational read-through cache facade.

Invalidation never deletes: put and clear advance generation counters,
and payload keys embed those counters, so entries written under an older
generation become unreachable and expire on their own TTL. Integrates
with gencache.infrastructure.cache.keys for key format (DRY).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from functools import wraps
from typing import Any

from gencache.core.constants import CACHE_TTL_DEFAULT_KEY, DEFAULT_CACHE_TTLS
from gencache.domain.exceptions import CacheConfigurationException, SerializationException
from gencache.domain.value_objects import Namespace
from gencache.infrastructure.cache.cache_protocol import StoreProtocol
from gencache.infrastructure.cache.keys import derive_item_key, versioned_key
from gencache.infrastructure.cache.serializer import JsonSerializer
from gencache.infrastructure.cache.timestamps import TimestampStore

logger = logging.getLogger(__name__)

ItemParts = Sequence[str | int | None]


class GenerationalCache:
    """Async cache with hierarchical, lazy invalidation.

    Every store call made by put and clear is awaited before returning.
    Store errors (redis.exceptions.RedisError) propagate to the caller;
    only payloads that fail to decode are absorbed, as a miss.
    """

    def __init__(
        self,
        store: StoreProtocol,
        ttls: Mapping[str, int] | None = None,
        serializer: JsonSerializer | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            store: Key-value backend, already bound to its partition
                (see gencache.infrastructure.cache.redis_store).
            ttls: Payload time-to-live per type name in seconds; must
                contain "default". Defaults to DEFAULT_CACHE_TTLS.
            serializer: Payload codec; defaults to JsonSerializer.
            clock: Generation source passed to TimestampStore.

        Raises:
            CacheConfigurationException: If ttls has no "default" entry
                or holds a non-positive value.
        """
        self.store = store
        self.ttls = dict(DEFAULT_CACHE_TTLS if ttls is None else ttls)
        self.serializer = serializer or JsonSerializer()
        self.timestamps = TimestampStore(store, clock=clock)
        if CACHE_TTL_DEFAULT_KEY not in self.ttls:
            raise CacheConfigurationException(
                f"TTL table must define a {CACHE_TTL_DEFAULT_KEY!r} entry"
            )
        for type_name, ttl in self.ttls.items():
            if ttl <= 0:
                raise CacheConfigurationException(
                    f"TTL for {type_name!r} must be positive, got {ttl}",
                    type_name=type_name,
                )

    def ttl_for(self, type_name: str) -> int:
        """Return the payload TTL of a type, falling back to "default"."""
        return self.ttls.get(type_name, self.ttls[CACHE_TTL_DEFAULT_KEY])

    async def get(self, namespace: Namespace, item_parts: ItemParts = ()) -> Any | None:
        """Return the cached value, or None on a miss.

        A miss covers: never cached, invalidated, expired, and corrupted.

        Args:
            namespace: Namespace to read from.
            item_parts: Identifier parts of one item; empty for the
                namespace-scope entry.

        Returns:
            Decoded value or None.
        """
        item_key = derive_item_key(item_parts)
        logger.info("Get from cache: %s key=%s", namespace, item_key or None)

        type_ts = await self.timestamps.get_type_timestamp(namespace)
        if not type_ts:
            logger.debug("Cache MISS (no type generation): %s", namespace)
            return None

        item_ts = None
        if item_key:
            item_ts = await self.timestamps.get_item_timestamp(namespace, type_ts, item_key)
            if not item_ts:
                logger.debug("Cache MISS (no item generation): %s key=%s", namespace, item_key)
                return None

        key = versioned_key(namespace, type_ts, item_key, item_ts)
        payload = await self.store.get(key)
        if payload is None:
            logger.debug("Cache MISS: %s", key)
            return None

        try:
            value = self.serializer.decode(payload)
        except SerializationException as e:
            logger.error("Cache payload not decodable for key %s: %s", key, e.message)
            return None
        logger.debug("Cache HIT: %s", key)
        return value

    async def put(self, value: Any, namespace: Namespace, item_parts: ItemParts = ()) -> bool:
        """Store value under a fresh generation. Returns True once written.

        Falsy values (None, 0, "", empty containers) are rejected with
        False and no store call.

        Args:
            value: JSON-serializable value to cache.
            namespace: Namespace to write to.
            item_parts: Identifier parts of one item; empty writes the
                namespace-scope entry and retires every item beneath it.

        Returns:
            True if stored, False if value was rejected.

        Raises:
            SerializationException: If value is not JSON-serializable.
        """
        item_key = derive_item_key(item_parts)
        logger.info("Put to cache: %s key=%s", namespace, item_key or None)
        if not value:
            logger.info("Cache put skipped for %s: value is %r", namespace, value)
            return False

        payload = self.serializer.encode(value)
        ttl = self.ttl_for(namespace.type_name)

        if item_key:
            type_ts, item_ts = await self.timestamps.bump_item_generation(namespace, item_key)
            key = versioned_key(namespace, type_ts, item_key, item_ts)
        else:
            type_ts = await self.timestamps.bump_type_generation(namespace)
            key = versioned_key(namespace, type_ts)

        await self.store.set(key, payload, ex=ttl)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def clear(self, namespace: Namespace, item_parts: ItemParts = ()) -> None:
        """Invalidate one item, or the whole namespace when item_parts is empty.

        Only the generation counter is advanced; no payload is deleted.
        """
        item_key = derive_item_key(item_parts)
        logger.info("Clear from cache: %s key=%s", namespace, item_key or None)
        if item_key:
            await self.timestamps.bump_item_generation(namespace, item_key)
        else:
            await self.timestamps.bump_type_generation(namespace)
        logger.info("Cache INVALIDATE: %s key=%s", namespace, item_key or None)

    async def get_or_load(
        self,
        namespace: Namespace,
        loader: Callable[[], Awaitable[Any]],
        item_parts: ItemParts = (),
    ) -> Any:
        """Read through: return the cached value, or load, cache and return it.

        Falsy loader results are returned but not cached.
        """
        value = await self.get(namespace, item_parts)
        if value is not None:
            return value
        value = await loader()
        await self.put(value, namespace, item_parts)
        return value


def _resolve_cache(
    args: tuple[Any, ...], kwargs: dict[str, Any]
) -> tuple[GenerationalCache | None, tuple[Any, ...], dict[str, Any]]:
    """Resolve GenerationalCache and args/kwargs for the wrapped function.

    Resolution order: keyword "cache", then args[0].cache, then args[0] if
    GenerationalCache. The resolved cache is removed from the arguments
    used to build the key (keyword or first argument); the wrapped
    function still receives all of its original arguments.
    """
    if isinstance(kwargs.get("cache"), GenerationalCache):
        key_kwargs = {k: v for k, v in kwargs.items() if k != "cache"}
        return kwargs["cache"], args, key_kwargs
    if args:
        first = args[0]
        if isinstance(first, GenerationalCache):
            return first, args[1:], kwargs
        cache_attr = getattr(first, "cache", None)
        if isinstance(cache_attr, GenerationalCache):
            return cache_attr, args[1:], kwargs
    return None, args, kwargs


def _default_key_builder(*args: Any, **kwargs: Any) -> tuple[Any, list[Any]]:
    """First argument is the tenant id; the rest (and sorted kwargs) are item parts.

    Parts are left as given so derive_item_key drops falsy ones exactly as
    get and clear do.
    """
    if not args:
        raise TypeError("cached function needs the tenant id as first argument")
    tenant_id, *rest = args
    parts: list[Any] = list(rest)
    parts.extend(f"{k}={v}" for k, v in sorted(kwargs.items()))
    return tenant_id, parts


def cached(
    type_name: str,
    key_builder: Callable[..., tuple[str, ItemParts]] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Decorator serving an async function's result through a GenerationalCache.

    The wrapped function must receive a GenerationalCache in one of these ways:
    - keyword argument "cache",
    - first argument has a .cache attribute that is a GenerationalCache,
    - or first argument is the GenerationalCache instance.
    Without one, the function is called uncached.

    Args:
        type_name: Type of the namespace results are cached under.
        key_builder: Optional callable(*args, **kwargs) -> (tenant_id, item_parts);
            by default the first argument is the tenant id and the remaining
            arguments are the item parts.

    Returns:
        Decorator that caches the return value when a cache is resolved.
    """
    build = key_builder or _default_key_builder

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            cache, key_args, key_kwargs = _resolve_cache(args, kwargs)
            if cache is None:
                return await func(*args, **kwargs)
            tenant_id, item_parts = build(*key_args, **key_kwargs)
            return await cache.get_or_load(
                Namespace(tenant_id, type_name),
                lambda: func(*args, **kwargs),
                item_parts,
            )

        return wrapper

    return decorator
