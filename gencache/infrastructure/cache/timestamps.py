"""Generation counters per namespace and per item.

Counters are written with a plain SET (no expiry) and are never
deleted; a newer value simply supersedes the old one. Reads and writes
are separate round-trips, so concurrent bumps of the same counter are
not atomic.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from gencache.domain.value_objects import Namespace
from gencache.infrastructure.cache.cache_protocol import StoreProtocol
from gencache.infrastructure.cache.keys import item_timestamp_key, type_timestamp_key
from gencache.shared.utils.clock import generation_clock

logger = logging.getLogger(__name__)


def _as_text(value: str | bytes | None) -> str | None:
    """Normalize a stored counter to str (clients without decode_responses return bytes)."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class TimestampStore:
    """Reads and advances type and item generations in the store.

    "ensure" creates a type generation only when absent; "bump" always
    writes a fresh value. Item bumps ensure the type generation first, so
    an item write never retires its siblings, while a type bump retires
    every item nested under the previous type generation.
    """

    def __init__(
        self,
        store: StoreProtocol,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize with a store and a generation source.

        Args:
            store: Key-value backend (e.g. redis.asyncio.Redis).
            clock: Zero-argument callable returning a new generation;
                defaults to the process-wide millisecond clock.
        """
        self.store = store
        self.clock = clock or generation_clock

    async def get_type_timestamp(self, namespace: Namespace) -> str | None:
        """Return the type generation, or None when the namespace is cold."""
        return _as_text(await self.store.get(type_timestamp_key(namespace)))

    async def set_type_timestamp(self, namespace: Namespace, ts: str | int) -> None:
        await self.store.set(type_timestamp_key(namespace), str(ts))

    async def get_item_timestamp(
        self, namespace: Namespace, type_ts: str | int, item_key: str
    ) -> str | None:
        """Return the item generation nested under type_ts, or None."""
        return _as_text(
            await self.store.get(item_timestamp_key(namespace, type_ts, item_key))
        )

    async def set_item_timestamp(
        self, namespace: Namespace, type_ts: str | int, item_key: str, ts: str | int
    ) -> None:
        await self.store.set(item_timestamp_key(namespace, type_ts, item_key), str(ts))

    async def ensure_type_timestamp(self, namespace: Namespace) -> tuple[str, bool]:
        """Return the type generation, creating it when absent.

        Returns:
            (type_ts, is_new): is_new is True only when this call wrote it.
        """
        existing = await self.get_type_timestamp(namespace)
        if existing:
            logger.debug("Type generation for %s: %s", namespace, existing)
            return existing, False
        new_ts = str(self.clock())
        await self.set_type_timestamp(namespace, new_ts)
        logger.info("Type generation not found for %s; created %s", namespace, new_ts)
        return new_ts, True

    async def bump_item_generation(
        self, namespace: Namespace, item_key: str
    ) -> tuple[str, str]:
        """Write a fresh item generation under the current type generation.

        Creates the type generation when the namespace is cold.

        Returns:
            (type_ts, new_item_ts)
        """
        type_ts, _ = await self.ensure_type_timestamp(namespace)
        new_ts = str(self.clock())
        await self.set_item_timestamp(namespace, type_ts, item_key, new_ts)
        logger.debug(
            "Item generation bumped: %s",
            item_timestamp_key(namespace, type_ts, item_key),
        )
        return type_ts, new_ts

    async def bump_type_generation(self, namespace: Namespace) -> str:
        """Write a fresh type generation, ignoring any existing one.

        Returns:
            The new type generation.
        """
        new_ts = str(self.clock())
        await self.set_type_timestamp(namespace, new_ts)
        logger.debug("Type generation bumped: %s", type_timestamp_key(namespace))
        return new_ts
