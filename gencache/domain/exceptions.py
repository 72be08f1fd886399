"""Exceptions for the gencache package.

Store connectivity failures are not represented here: errors raised by
the Redis client (redis.exceptions.RedisError and subclasses) propagate
to callers unchanged.
"""

from typing import Any


class GenCacheException(Exception):
    """Base exception for all gencache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, type_name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class SerializationException(GenCacheException):
    """Raised when a value cannot be encoded or a payload cannot be decoded."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failed operation and the underlying reason.

        Args:
            operation: "encode" or "decode".
            reason: Message of the underlying error.
        """
        super().__init__(
            f"Failed to {operation} cache payload: {reason}",
            "SERIALIZATION_ERROR",
            {"operation": operation, "reason": reason},
        )


class CacheConfigurationException(GenCacheException):
    """Raised when the TTL table handed to the cache is unusable."""

    def __init__(self, message: str, type_name: str | None = None) -> None:
        details = {"type_name": type_name} if type_name else {}
        super().__init__(message, "CACHE_CONFIGURATION_ERROR", details)
