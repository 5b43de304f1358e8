"""Pre-configured logger factory shared by all FitCoach modules.

Usage:
    from fitcoach.utils.logger import get_logger
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from fitcoach.config import get_settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _default_level() -> int:
    settings = get_settings()
    if settings.debug:
        return logging.DEBUG
    return logging.getLevelName(settings.log_level)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a named logger writing to stdout with the project format.

    The level comes from ``Settings.log_level`` (``DEBUG`` when ``Settings.debug``
    is set) unless ``level`` overrides it.
    """

    logger = logging.getLogger(name)

    # Handlers are attached once per logger name.
    if not logger.handlers:
        resolved_level = level if level is not None else _default_level()
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(resolved_level)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

        # Records stop here so a root handler does not print them twice.
        logger.propagate = False

    return logger
