"""structlog configuration."""

from __future__ import annotations

import logging
import sys

import structlog

from chatmarkup.settings import settings


def configure_logging() -> None:
    """Configure structlog from CHATMARKUP_LOG_LEVEL and CHATMARKUP_LOG_FORMAT.

    Call once at application startup; importing chatmarkup never does.
    """
    level = getattr(logging, settings.log_level())
    if settings.log_format() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
