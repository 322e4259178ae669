"""Logging setup driven by `LoggingSettings`."""

import logging
from typing import Optional

from rich.logging import RichHandler

from .config import LoggingSettings, get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure the ``modetempo`` logger hierarchy.

    Replaces any handler installed by a previous call, so it is safe to
    call again after settings change.

    Args:
        settings: Logging settings (defaults to the cached global settings)

    Returns:
        The package root logger
    """
    settings = settings or get_settings().logging
    logger = logging.getLogger("modetempo")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if settings.format == "rich":
        handler: logging.Handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    logger.propagate = False
    return logger
