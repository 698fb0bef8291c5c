"""Logging setup for exifgeo.

Library modules obtain their logger through :func:`get_logger` and only emit
DEBUG records. Applications (and the ``exifgeo`` command) call
:func:`configure_logging` to route those records through a rich console
handler. The level defaults to the ``EXIFGEO_LOG_LEVEL`` environment
variable, for example::

    EXIFGEO_LOG_LEVEL=DEBUG exifgeo to-decimal 10 30 0/0
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "exifgeo"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the logger for a module inside the exifgeo package."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str | int | None = None, console: Console | None = None
) -> logging.Logger:
    """Install a single RichHandler on the package logger.

    Args:
        level: Log level name or number. Falls back to the environment
            variable, then to WARNING.
        console: Console to write to; stderr when omitted.

    Returns:
        logging.Logger: The configured package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.getLevelName(DEFAULT_LOG_LEVEL)

    logger = get_logger()
    logger.setLevel(level)
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
