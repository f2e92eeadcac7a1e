"""Structured logging configuration.

This module initializes a logger with a stable structured format.
Events are rendered as JSON by structlog and handed to the standard
logging module, so host applications decide where they go.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def enable_console_logging(level: int = logging.INFO) -> None:
    """Send structured events to stderr at the given level.

    Args:
        level: Minimum stdlib logging level to emit.
    """
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger().setLevel(level)
