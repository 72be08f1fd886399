"""Cache key builders. Single place for the physical key layout (DRY).

Layout (SEP = CACHE_KEY_SEP):
    type generation:     {tenant}_{type}_timestamp
    item generation:     {tenant}_{type}_{typeGen}_{itemKey}_timestamp
    namespace payload:   {tenant}_{type}_{typeGen}
    item payload:        {tenant}_{type}_{typeGen}_{itemKey}_{itemGen}

Identifier parts are not escaped: a part containing CACHE_KEY_SEP can
produce the same item key as two adjacent parts.
"""

from collections.abc import Iterable

from gencache.core.constants import CACHE_KEY_SEP, CACHE_TIMESTAMP_SUFFIX
from gencache.domain.value_objects import Namespace


def derive_item_key(parts: Iterable[str | int | None]) -> str:
    """Join identifier parts into one item key.

    Falsy parts (None, "", 0) are dropped so they never produce a double
    separator. An empty list gives "", which addresses the namespace as
    a whole.

    Args:
        parts: Ordered identifier parts.

    Returns:
        Item key, or "" for namespace scope.
    """
    return CACHE_KEY_SEP.join(str(part) for part in parts if part)


def namespace_key(namespace: Namespace) -> str:
    """Logical key of a namespace."""
    return namespace.key


def type_timestamp_key(namespace: Namespace) -> str:
    """Key holding the type generation of a namespace."""
    return f"{namespace.key}{CACHE_KEY_SEP}{CACHE_TIMESTAMP_SUFFIX}"


def item_timestamp_key(namespace: Namespace, type_ts: str | int, item_key: str) -> str:
    """Key holding an item generation, nested under one type generation."""
    return (
        f"{namespace.key}{CACHE_KEY_SEP}{type_ts}{CACHE_KEY_SEP}"
        f"{item_key}{CACHE_KEY_SEP}{CACHE_TIMESTAMP_SUFFIX}"
    )


def versioned_key(
    namespace: Namespace,
    type_ts: str | int,
    item_key: str = "",
    item_ts: str | int | None = None,
) -> str:
    """Physical payload key for namespace scope or item scope.

    Args:
        namespace: Namespace of the entry.
        type_ts: Type generation the entry is written under.
        item_key: Derived item key; "" for namespace scope.
        item_ts: Item generation; required when item_key is set.

    Returns:
        The versioned payload key.

    Raises:
        ValueError: If item_key is set without item_ts.
    """
    base = f"{namespace.key}{CACHE_KEY_SEP}{type_ts}"
    if not item_key:
        return base
    if item_ts is None:
        raise ValueError(f"Item generation is required for item key {item_key!r}")
    return f"{base}{CACHE_KEY_SEP}{item_key}{CACHE_KEY_SEP}{item_ts}"
