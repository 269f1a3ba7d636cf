"""Structured logging for fscopy.

The module logger is a structlog wrapper around the stdlib ``fscopy`` logger,
so importing the package leaves the host's structlog configuration alone and
output stays silent until something attaches a handler. Applications that
want fscopy's own console output call ``setup_logging()``.
"""

from __future__ import annotations

import logging
import sys

import structlog

from fscopy.infrastructure.config import load_settings

LOGGER_NAME = "fscopy"

logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=False),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)


def setup_logging() -> logging.Logger:
    """Send fscopy logs to stderr at the FSCOPY_LOG_LEVEL level."""
    std_logger = logging.getLogger(LOGGER_NAME)
    std_logger.setLevel(getattr(logging, load_settings().log_level, logging.INFO))

    if not std_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        std_logger.addHandler(handler)

    return std_logger
