"""Shared telemetry: logging setup for the gencache logger hierarchy."""

from gencache.shared.telemetry.logging import PACKAGE_LOGGER, setup_logging

__all__ = ["PACKAGE_LOGGER", "setup_logging"]
