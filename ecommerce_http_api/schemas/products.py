"""
ecommerce_http_api/schemas/products.py

Pydantic models for the "products" HTTP API. `price` is optional and not
range-checked.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel


ProductID = int


class ProductBase(APIModel):
    name: str = Field(..., description="Product name", examples=["Laptop"])
    description: Optional[str] = Field(default=None, description="Free-form description")
    price: Optional[float] = Field(default=None, description="Unit price", examples=[1000.0])
    active: bool = Field(True, description="False once the product is soft-deleted.")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """
    Full-field update payload: name, price, description and active flag
    are all overwritten.
    """


class ProductRead(ProductBase):
    id: ProductID = Field(..., description="Database identifier")
    created_at: datetime = Field(..., description="Creation timestamp")


__all__ = ["ProductID", "ProductBase", "ProductCreate", "ProductUpdate", "ProductRead"]
