# ecommerce_http_api/mappers.py

"""
Entity -> response schema transforms.

These functions only read the attributes of the objects they are given;
they never query the database. Order lines are built from their snapshot
columns, so a product renamed or deactivated after the order was placed
does not change how the order is displayed.
"""

from __future__ import annotations

from typing import Iterable, List

from .db import models
from .schemas.orders import OrderLineResponse, OrderResponse
from .schemas.products import ProductRead
from .schemas.users import UserRead


def user_to_read(user: models.User) -> UserRead:
    return UserRead.model_validate(user)


def product_to_read(product: models.Product) -> ProductRead:
    return ProductRead.model_validate(product)


def order_line_to_response(line: models.OrderLine) -> OrderLineResponse:
    return OrderLineResponse(
        product_id=line.product_id,
        product_name=line.product_name,
        description_snap=line.description_snap,
        quantity=line.quantity,
        unit_price=line.unit_price,
    )


def order_to_response(order: models.Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        user_id=order.user_id,
        created_at=order.created_at,
        total=order.total,
        active=order.active,
        details=[order_line_to_response(line) for line in order.lines],
    )


def orders_to_response(orders: Iterable[models.Order]) -> List[OrderResponse]:
    return [order_to_response(order) for order in orders]


__all__ = [
    "user_to_read",
    "product_to_read",
    "order_line_to_response",
    "order_to_response",
    "orders_to_response",
]
