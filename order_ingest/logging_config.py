"""Logging setup for the command line entry point.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by whoever owns the process.
"""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Args:
        level: Level name such as ``INFO`` or ``DEBUG``.

    Returns:
        The configured ``order_ingest`` logger.
    """
    logger = logging.getLogger("order_ingest")
    logger.setLevel(level.upper())
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
