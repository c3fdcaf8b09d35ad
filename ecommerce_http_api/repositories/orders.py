# ecommerce_http_api/repositories/orders.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from ..db import models


class OrdersRepository:
    """
    Data-access layer for orders and their lines.

    Lines are always loaded eagerly: every caller maps orders to responses
    that include them.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return (
            select(models.Order)
            .options(selectinload(models.Order.lines))
            .order_by(models.Order.id)
        )

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_all(self) -> Sequence[models.Order]:
        result = self.session.execute(self._base_select())
        return list(result.scalars().all())

    def list_active(self) -> Sequence[models.Order]:
        stmt = self._base_select().where(models.Order.active.is_(True))
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def list_by_user(
        self,
        user_id: int,
        *,
        active_only: bool = False,
    ) -> Sequence[models.Order]:
        """
        Return the orders owned by ``user_id``, optionally only active ones.
        """
        stmt = self._base_select().where(models.Order.user_id == user_id)
        if active_only:
            stmt = stmt.where(models.Order.active.is_(True))
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, order_id: int) -> Optional[models.Order]:
        return self.session.get(
            models.Order,
            order_id,
            options=[selectinload(models.Order.lines)],
        )

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def save(self, order: models.Order) -> models.Order:
        """
        Add the order (cascading to its lines) and flush.
        """
        self.session.add(order)
        self.session.flush()
        return order
