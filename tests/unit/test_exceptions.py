"""Tests for gencache exceptions (error_code, message, details)."""

from gencache.domain.exceptions import (
    CacheConfigurationException,
    GenCacheException,
    SerializationException,
)


def test_base_exception_default_error_code() -> None:
    exc = GenCacheException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "GenCacheException"
    assert exc.details == {}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = GenCacheException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert str(exc) == "Oops"


def test_serialization_exception() -> None:
    exc = SerializationException("decode", "Expecting value")
    assert exc.message == "Failed to decode cache payload: Expecting value"
    assert exc.error_code == "SERIALIZATION_ERROR"
    assert exc.details == {"operation": "decode", "reason": "Expecting value"}
    assert isinstance(exc, GenCacheException)


def test_cache_configuration_exception_with_type_name() -> None:
    exc = CacheConfigurationException("bad ttl", type_name="report")
    assert exc.error_code == "CACHE_CONFIGURATION_ERROR"
    assert exc.details == {"type_name": "report"}


def test_cache_configuration_exception_without_type_name() -> None:
    exc = CacheConfigurationException("missing default")
    assert exc.details == {}
