"""
ecommerce_http_api/schemas/orders.py

Pydantic models for the "orders" HTTP API.

Create and update requests carry a plain JSON list of order lines
(``[{"productId": 1, "quantity": 2}, ...]``); the server looks up each
product and snapshots its name, description and price into the stored line.
Responses expose those snapshots, never the live product.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import INT64_MAX, INT64_MIN, APIModel


OrderID = int


class OrderLineRequest(APIModel):
    """
    One requested line: which product, and how many.
    """

    product_id: int = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Id of an existing product",
        examples=[1],
    )
    quantity: int = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Units ordered",
        examples=[2],
    )


class OrderLineResponse(APIModel):
    """
    A stored order line, flattened for display.
    """

    product_id: int
    product_name: str = Field(..., description="Product name at ordering time")
    description_snap: Optional[str] = Field(
        default=None,
        description="Product description at ordering time",
    )
    quantity: int
    unit_price: float = Field(..., description="Product price at ordering time")


class OrderResponse(APIModel):
    id: OrderID
    user_id: int
    created_at: datetime
    total: float = Field(..., description="Sum of unitPrice * quantity over the lines")
    active: bool
    details: List[OrderLineResponse] = Field(default_factory=list)


__all__ = ["OrderID", "OrderLineRequest", "OrderLineResponse", "OrderResponse"]
