"""
ecommerce_http_api.db
=====================

Database package for the e-commerce HTTP API.

Centralizes the public DB primitives so the rest of the service can import
them from a single place, e.g.:

    from ecommerce_http_api.db import Base, build_engine, get_db
"""

from .models import Base, Order, OrderLine, Product, User
from .session import build_engine, build_session_factory, db_session, get_db

__all__ = [
    "Base",
    "User",
    "Product",
    "Order",
    "OrderLine",
    "build_engine",
    "build_session_factory",
    "db_session",
    "get_db",
]
