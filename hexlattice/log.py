"""Logging setup for the ``hexlattice`` logger hierarchy."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from .config import LoggingSettings

ROOT_LOGGER = "hexlattice"


def setup_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger and return it.

    Calling this again replaces the previous handler.
    """

    settings = settings or LoggingSettings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, settings.level))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if settings.structured:
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter(settings.format_str)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
