# ecommerce_http_api/repositories/products.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..db import models


class ProductsRepository:
    """
    Thin data-access layer around the Product model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Product).order_by(models.Product.id)

    def list_all(self) -> Sequence[models.Product]:
        result = self.session.execute(self._base_select())
        return list(result.scalars().all())

    def list_active(self) -> Sequence[models.Product]:
        stmt = self._base_select().where(models.Product.active.is_(True))
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, product_id: int) -> Optional[models.Product]:
        return self.session.get(models.Product, product_id)

    def save(self, product: models.Product) -> models.Product:
        self.session.add(product)
        self.session.flush()
        return product
