"""Cache: generational Redis cache, key builders and generation counters.

GenerationalCache is the entry point; key format lives in keys.py (DRY).
"""

from gencache.infrastructure.cache.cache_protocol import StoreProtocol
from gencache.infrastructure.cache.generational_cache import GenerationalCache, cached
from gencache.infrastructure.cache.keys import (
    derive_item_key,
    item_timestamp_key,
    namespace_key,
    type_timestamp_key,
    versioned_key,
)
from gencache.infrastructure.cache.redis_store import close_store, connect_store, create_cache
from gencache.infrastructure.cache.serializer import JsonSerializer
from gencache.infrastructure.cache.timestamps import TimestampStore

__all__ = [
    "GenerationalCache",
    "JsonSerializer",
    "StoreProtocol",
    "TimestampStore",
    "cached",
    "close_store",
    "connect_store",
    "create_cache",
    "derive_item_key",
    "item_timestamp_key",
    "namespace_key",
    "type_timestamp_key",
    "versioned_key",
]
