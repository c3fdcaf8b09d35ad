"""
Top-level export module for HTTP API schemas.
"""
from . import common
from . import orders
from . import products
from . import users

# Envelopes
from .common import (
    APIModel,
    ErrorResponse,
    SuccessResponse,
)

# Users
from .users import (
    UserCreate,
    UserRead,
    UserUpdate,
)

# Products
from .products import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
)

# Orders
from .orders import (
    OrderLineRequest,
    OrderLineResponse,
    OrderResponse,
)

__all__ = [
    # Submodules
    "common", "orders", "products", "users",

    # Envelopes
    "APIModel", "ErrorResponse", "SuccessResponse",

    # Users
    "UserCreate", "UserRead", "UserUpdate",

    # Products
    "ProductCreate", "ProductRead", "ProductUpdate",

    # Orders
    "OrderLineRequest", "OrderLineResponse", "OrderResponse",
]
