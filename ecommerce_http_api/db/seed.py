# ecommerce_http_api/db/seed.py

"""
Demo data inserted at startup when ``seed_data`` is enabled.

Each table is seeded independently and only while it is still empty, so
restarting the service never duplicates rows.
"""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ecommerce_http_api.logging import get_logger

from .models import Product, User

logger = get_logger(__name__)


DEMO_PRODUCTS: List[Dict[str, Any]] = [
    {
        "name": "Laptop Gamer ASUS",
        "description": "Laptop con RTX 4060 y 16GB RAM",
        "price": 28999.99,
    },
    {
        "name": "iPhone 15 Pro",
        "description": "128GB, Titanio Azul",
        "price": 24999.99,
    },
    {
        "name": "Audífonos Sony WH-1000XM5",
        "description": "Cancelación de ruido premium",
        "price": 7499.99,
    },
    {
        "name": "Monitor LG UltraWide 34''",
        "description": "Resolución 3440x1440, HDR10",
        "price": 8999.99,
    },
    {
        "name": "Teclado Mecánico Keychron K6",
        "description": "Switches Red, inalámbrico",
        "price": 1799.99,
    },
]

DEMO_USERS: List[Dict[str, Any]] = [
    {"name": "Jorge", "last_name": "Avila", "email": "jorge@example.com"},
    {"name": "Benjamin", "last_name": "Lopez", "email": "benjamin@example.com"},
    {"name": "Jose", "last_name": "Perez", "email": "jose@example.com"},
]


def _count(session: Session, model: type) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


def seed_demo_data(session: Session) -> Dict[str, int]:
    """
    Insert the demo catalogue and users into empty tables.

    Returns how many rows were added per table. The caller owns the
    transaction.
    """
    added = {"products": 0, "users": 0}

    if _count(session, Product) == 0:
        session.add_all(Product(active=True, **row) for row in DEMO_PRODUCTS)
        added["products"] = len(DEMO_PRODUCTS)
        logger.info("seed_products_added", count=added["products"])

    if _count(session, User) == 0:
        session.add_all(User(active=True, **row) for row in DEMO_USERS)
        added["users"] = len(DEMO_USERS)
        logger.info("seed_users_added", count=added["users"])

    session.flush()
    return added


__all__ = ["DEMO_PRODUCTS", "DEMO_USERS", "seed_demo_data"]
