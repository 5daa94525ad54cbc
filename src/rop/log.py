"""
structlog setup for applications that want rop's events rendered.

rop only ever calls structlog.get_logger(); it never configures logging on
import. Applications call configure_logging() once at start-up (or keep their
own structlog configuration).
"""

from __future__ import annotations

import structlog

from rop.config import RopSettings, get_settings


def configure_logging(settings: RopSettings | None = None) -> None:
    """
    Configure structlog for rop's structured events.

    Console: colored, human-readable output for development.
    JSON: one JSON object per line for log shippers.
    """
    settings = settings or get_settings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.level_number()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
