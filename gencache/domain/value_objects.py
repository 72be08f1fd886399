"""Domain value objects for the cache.

Value objects are immutable and validate themselves on creation.
"""

from dataclasses import dataclass

from gencache.core.constants import CACHE_KEY_SEP


@dataclass(frozen=True)
class Namespace:
    """A (tenant, type) pair scoping a family of cached items.

    All items of one namespace share a type generation, so clearing the
    namespace retires every item cached under it.
    """

    tenant_id: str
    type_name: str

    def __post_init__(self) -> None:
        if not self.tenant_id:
            raise ValueError("Namespace tenant_id must be a non-empty string")
        if not self.type_name:
            raise ValueError("Namespace type_name must be a non-empty string")

    @property
    def key(self) -> str:
        """Logical key of the namespace: "{tenant_id}_{type_name}"."""
        return f"{self.tenant_id}{CACHE_KEY_SEP}{self.type_name}"

    def __str__(self) -> str:
        return self.key
