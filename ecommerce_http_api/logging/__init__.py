# ecommerce_http_api/logging/__init__.py

"""
Logging helpers for the e-commerce HTTP API.

API code obtains its loggers from here:

    from ecommerce_http_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("order_created", order_id=order.id, total=order.total)

Loggers are ``structlog`` bound loggers; ``configure_logging`` in
``ecommerce_http_api.logging.config`` installs the processor chain once at
startup.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

DEFAULT_LOGGER_NAME = "ecommerce_http_api"


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Get a structlog logger bound to ``name`` (the service name by default).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME, **initial_values)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
