"""
Structured logging setup.

Stdlib logging carries the records; structlog renders them with
key/value context.
"""

import logging
import sys
from typing import Any

import structlog

from cadence.core.config import settings


def configure_logging() -> None:
    """Configure stdlib logging and structlog once at startup."""
    level = logging.DEBUG if settings.DEBUG else logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer = (structlog.processors.JSONRenderer() if settings.LOG_JSON else structlog.dev.ConsoleRenderer())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str) -> Any:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def bind_log_context(**kwargs: Any) -> None:
    """Add context to all future log entries of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()
