# ecommerce_http_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files:

    from ecommerce_http_api.repositories import OrdersRepository
"""

from .orders import OrdersRepository
from .products import ProductsRepository
from .users import UsersRepository

__all__ = [
    "OrdersRepository",
    "ProductsRepository",
    "UsersRepository",
]
