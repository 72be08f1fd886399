"""Logging for the gencache logger hierarchy.

Modules log through logging.getLogger(__name__), so every record lands
under the "gencache" logger. setup_logging attaches one stdout handler
there and leaves the root logger to the host application.
"""

import logging
import sys

from gencache.core.config import get_settings

PACKAGE_LOGGER = "gencache"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | None = None) -> logging.Logger:
    """Configure the "gencache" logger and return it.

    Level is the given one, else DEBUG when settings.debug is True,
    otherwise INFO. Repeated calls update the level without adding a
    second handler.

    Args:
        level: Optional explicit logging level.

    Returns:
        The package logger.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_gencache_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gencache_handler = True
        logger.addHandler(handler)
    return logger
