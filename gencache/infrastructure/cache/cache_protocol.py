"""Store protocol for the generational cache (DIP).

redis.asyncio.Redis satisfies it; tests use fakeredis or AsyncMock.
"""

from typing import Any, Protocol


class StoreProtocol(Protocol):
    """Key-value backend used by TimestampStore and GenerationalCache."""

    async def get(self, name: str) -> str | bytes | None:
        """Return the stored text, or None when the key is absent."""
        ...

    async def set(self, name: str, value: Any, ex: int | None = None) -> Any:
        """Store value; expire after ex seconds when given, never otherwise."""
        ...
