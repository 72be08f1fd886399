"""Tests for logging setup of the gencache logger hierarchy."""

import logging

import pytest

from gencache.shared.telemetry.logging import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configures_package_logger_not_root() -> None:
    root_handlers = list(logging.getLogger().handlers)
    logger = setup_logging()
    assert logger.name == "gencache"
    assert logging.getLogger().handlers == root_handlers


def test_defaults_to_info() -> None:
    assert setup_logging().level == logging.INFO


def test_debug_setting_selects_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    assert setup_logging().level == logging.DEBUG


def test_explicit_level_wins() -> None:
    assert setup_logging(logging.WARNING).level == logging.WARNING


def test_repeated_setup_adds_one_handler() -> None:
    before = len(logging.getLogger(PACKAGE_LOGGER).handlers)
    setup_logging()
    setup_logging(logging.DEBUG)
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert len(logger.handlers) == before + 1
    assert logger.level == logging.DEBUG


def test_module_loggers_are_under_package_logger() -> None:
    module_logger = logging.getLogger("gencache.infrastructure.cache.generational_cache")
    assert module_logger.parent.name.startswith(PACKAGE_LOGGER)
