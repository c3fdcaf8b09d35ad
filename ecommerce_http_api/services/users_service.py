# ecommerce_http_api/services/users_service.py

from __future__ import annotations

from typing import List

from ecommerce_http_api.db import models
from ecommerce_http_api.exceptions import ResourceNotFoundError
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.repositories.users import UsersRepository
from ecommerce_http_api.schemas.users import UserCreate, UserUpdate

logger = get_logger(__name__)


class UsersService:
    """
    Business operations on users.

    Responsibilities:
    - Existence checks (ResourceNotFoundError for unknown ids).
    - Full-field updates and soft deletion via the `active` flag.
    - Committing the unit of work for every mutating call.
    """

    def __init__(self, repo: UsersRepository) -> None:
        self._repo = repo

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_users(self) -> List[models.User]:
        logger.info("users_listing")
        users = list(self._repo.list_all())
        logger.info("users_listed", count=len(users))
        return users

    def list_active_users(self) -> List[models.User]:
        logger.info("active_users_listing")
        users = list(self._repo.list_active())
        logger.info("active_users_listed", count=len(users))
        return users

    def get_user(self, user_id: int) -> models.User:
        """
        Retrieve a user by id, active or not.
        """
        logger.info("user_fetching", user_id=user_id)
        user = self._repo.get_by_id(user_id)
        if user is None:
            logger.error("user_not_found", user_id=user_id)
            raise ResourceNotFoundError("User", "id", user_id)
        return user

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_user(self, payload: UserCreate) -> models.User:
        """
        Persist a new user as given.

        Email uniqueness is left to the table constraint; a duplicate
        surfaces as an IntegrityError from the commit.
        """
        logger.info("user_creating", email=payload.email)
        user = models.User(
            name=payload.name,
            last_name=payload.last_name,
            email=payload.email,
            active=payload.active,
        )
        self._repo.save(user)
        self._repo.session.commit()
        logger.info("user_created", user_id=user.id)
        return user

    def update_user(self, user_id: int, payload: UserUpdate) -> models.User:
        """
        Overwrite email, name, last name and active flag. The id and the
        creation date are never changed.
        """
        logger.info("user_updating", user_id=user_id)
        user = self._repo.get_by_id(user_id)
        if user is None:
            logger.error("user_update_not_found", user_id=user_id)
            raise ResourceNotFoundError("User", "id", user_id)

        user.email = payload.email
        user.name = payload.name
        user.last_name = payload.last_name
        user.active = payload.active

        self._repo.save(user)
        self._repo.session.commit()
        logger.info("user_updated", user_id=user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        """
        Soft-delete a user. Deleting an already inactive user is a no-op
        that still succeeds.
        """
        logger.info("user_deleting", user_id=user_id)
        user = self._repo.get_by_id(user_id)
        if user is None:
            logger.error("user_delete_not_found", user_id=user_id)
            raise ResourceNotFoundError("User", "id", user_id)

        user.active = False
        self._repo.save(user)
        self._repo.session.commit()
        logger.info("user_deactivated", user_id=user_id)
