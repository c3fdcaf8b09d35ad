"""
ecommerce_http_api.services
---------------------------

Service layer aggregation for the e-commerce HTTP API.

Routers and other callers should import service classes from this package
instead of depending directly on repositories.

Example:

    from ecommerce_http_api.services import OrdersService, UsersService
"""

from .orders_service import OrdersService
from .products_service import ProductsService
from .users_service import UsersService

__all__ = [
    "OrdersService",
    "ProductsService",
    "UsersService",
]
