# ecommerce_http_api/repositories/users.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from ..db import models


class UsersRepository:
    """
    Thin data-access layer around the User model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.User).order_by(models.User.id)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_all(self) -> Sequence[models.User]:
        result = self.session.execute(self._base_select())
        return list(result.scalars().all())

    def list_active(self) -> Sequence[models.User]:
        stmt = self._base_select().where(models.User.active.is_(True))
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def get_by_id(self, user_id: int) -> Optional[models.User]:
        """
        Fetch a single user by primary key, or None if it does not exist.
        """
        return self.session.get(models.User, user_id)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def save(self, user: models.User) -> models.User:
        """
        Add (or re-attach) a user and flush so generated columns are set.
        """
        self.session.add(user)
        self.session.flush()
        return user
