"""Core constants: cache key structure and default time-to-live values.

Single source of truth for the physical key layout. Used by
gencache.infrastructure.cache.keys and by configuration defaults.
"""

# Delimiter for every composite key (namespace, generations, item parts).
# Item identifier parts are not escaped; a part containing it can collide
# with two adjacent parts.
CACHE_KEY_SEP = "_"

# Suffix of the keys holding generation counters
CACHE_TIMESTAMP_SUFFIX = "timestamp"

# Reserved entry of the TTL table, used for unregistered types
CACHE_TTL_DEFAULT_KEY = "default"

# Payload time-to-live per type name, in seconds
DEFAULT_CACHE_TTLS: dict[str, int] = {
    "post_statistic": 60,
    CACHE_TTL_DEFAULT_KEY: 60 * 60,
}

# Logical Redis database per deployment environment
DEFAULT_REDIS_PARTITIONS: dict[str, int] = {
    "development": 3,
    "test": 4,
    "production": 5,
}
