# ecommerce_http_api/logging/config.py

"""
Structured logging setup for the e-commerce HTTP API.

Called once from the application factory::

    from ecommerce_http_api.logging.config import configure_logging

    log = configure_logging(settings)
    log.info("app_starting")

Produces JSON lines when ``log_format`` is "json" and coloured console
output otherwise. Standard-library loggers (uvicorn, SQLAlchemy) are routed
to the same stream at the same level.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from ecommerce_http_api.config import Settings, get_config

from . import DEFAULT_LOGGER_NAME, get_logger


def _parse_level(value: Optional[str]) -> int:
    """
    Map a level name ('DEBUG', 'info', ...) to a logging constant.
    Unknown names fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    service_name: str = DEFAULT_LOGGER_NAME,
) -> Any:
    """
    Configure structlog and stdlib logging, then return a service logger.
    """
    settings = settings or get_config()
    level = _parse_level(settings.log_level)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    # Third-party libraries log through the stdlib
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    return get_logger(service_name)


__all__ = ["configure_logging"]
