"""
Provider Model Catalog - Structured Logging Configuration
=========================================================
Sets up structlog for JSON or console structured logging.
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from provider_catalog.config import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging based on settings."""
    settings = settings or default_settings
    level = getattr(logging, settings.log_level)

    # Shared processors for all configurations
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        renderers: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route standard library logging through the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a lazy logger that picks up the configuration in effect at first use."""
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
