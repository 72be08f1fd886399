"""Cache configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The TTL table and the environment partition map are
validated at load time.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gencache.core.constants import (
    CACHE_TTL_DEFAULT_KEY,
    DEFAULT_CACHE_TTLS,
    DEFAULT_REDIS_PARTITIONS,
)


class Settings(BaseSettings):
    """Cache settings loaded from environment and .env.

    Dict fields (cache_ttls, redis_partitions) are read from the
    environment as JSON, e.g. CACHE_TTLS='{"default": 600, "report": 30}'.
    """

    # App
    app_name: str = "gencache"
    debug: bool = False
    # Deployment environment; selects the Redis logical database
    environment: str = "development"

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: SecretStr | None = None
    redis_partitions: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_REDIS_PARTITIONS)
    )
    redis_socket_timeout: float | None = 5.0
    redis_connect_timeout: float | None = 5.0

    # Payload time-to-live per type name (seconds); "default" is required
    cache_ttls: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_CACHE_TTLS))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ttls_and_partition(self) -> "Settings":
        """Validate the TTL table and the environment partition.

        - cache_ttls must contain "default" and only positive values.
        - environment must have an entry in redis_partitions.
        """
        if CACHE_TTL_DEFAULT_KEY not in self.cache_ttls:
            raise ValueError(
                f"cache_ttls must define a {CACHE_TTL_DEFAULT_KEY!r} entry. "
                "Set CACHE_TTLS in environment or .env file."
            )
        for type_name, ttl in self.cache_ttls.items():
            if ttl <= 0:
                raise ValueError(
                    f"cache_ttls[{type_name!r}] must be a positive number of seconds, got: {ttl}"
                )
        if self.environment not in self.redis_partitions:
            raise ValueError(
                f"No Redis partition configured for environment {self.environment!r}. "
                f"Known environments: {sorted(self.redis_partitions)}"
            )
        return self

    @property
    def redis_db(self) -> int:
        """Logical Redis database index for the current environment."""
        return self.redis_partitions[self.environment]


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
