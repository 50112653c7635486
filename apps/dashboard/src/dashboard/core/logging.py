"""Structured logging configuration for the dashboard service."""

import logging
import sys
from typing import Any

import structlog

from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the given environment.

    Development gets colored console lines; everything else gets one JSON
    object per line on stdout for log aggregation.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
        logger_factory = structlog.PrintLoggerFactory()
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
        logger_factory = structlog.PrintLoggerFactory(file=sys.stdout)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)
