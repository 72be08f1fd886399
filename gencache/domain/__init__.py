"""Domain layer: value objects and exceptions. No I/O."""

from gencache.domain.exceptions import (
    CacheConfigurationException,
    GenCacheException,
    SerializationException,
)
from gencache.domain.value_objects import Namespace

__all__ = [
    "CacheConfigurationException",
    "GenCacheException",
    "Namespace",
    "SerializationException",
]
