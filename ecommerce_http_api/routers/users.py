# ecommerce_http_api/routers/users.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ecommerce_http_api.db.session import get_session
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.mappers import user_to_read
from ecommerce_http_api.repositories.users import UsersRepository
from ecommerce_http_api.routers.params import EntityId
from ecommerce_http_api.schemas.common import SuccessResponse
from ecommerce_http_api.schemas.users import UserCreate, UserRead, UserUpdate
from ecommerce_http_api.services.users_service import UsersService

router = APIRouter(prefix="/user", tags=["users"])
logger = get_logger(__name__)


def get_users_service(session: Session = Depends(get_session)) -> UsersService:
    """
    Dependency-injected factory for UsersService.

    Tests can swap the implementation through ``app.dependency_overrides``.
    """
    return UsersService(UsersRepository(session))


@router.get(
    "",
    response_model=SuccessResponse[List[UserRead]],
    summary="Get all users",
    description=(
        "Retrieve every user, or only active users when activeOnly is true."
    ),
)
def list_users(
    *,
    service: UsersService = Depends(get_users_service),
    active_only: bool = Query(
        False,
        alias="activeOnly",
        description="Only return users whose active flag is true.",
    ),
) -> SuccessResponse[List[UserRead]]:
    logger.info("request_list_users", active_only=active_only)
    users = service.list_active_users() if active_only else service.list_users()
    message = (
        f"Retrieved {len(users)} active users successfully"
        if active_only
        else f"Retrieved {len(users)} users successfully"
    )
    return SuccessResponse.of(status.HTTP_200_OK, message, [user_to_read(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=SuccessResponse[UserRead],
    summary="Get user by ID",
    description="Fetch a single user, active or not.",
)
def get_user(
    *,
    user_id: EntityId,
    service: UsersService = Depends(get_users_service),
) -> SuccessResponse[UserRead]:
    logger.info("request_get_user", user_id=user_id)
    user = service.get_user(user_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"User {user_id} retrieved successfully",
        user_to_read(user),
    )


@router.post(
    "",
    response_model=SuccessResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create new user",
)
def create_user(
    *,
    payload: UserCreate,
    service: UsersService = Depends(get_users_service),
) -> SuccessResponse[UserRead]:
    logger.info("request_create_user", email=payload.email)
    user = service.create_user(payload)
    return SuccessResponse.of(
        status.HTTP_201_CREATED,
        f"User '{user.name} {user.last_name}' created successfully with ID: {user.id}",
        user_to_read(user),
    )


@router.put(
    "/{user_id}",
    response_model=SuccessResponse[UserRead],
    summary="Update user",
    description="Overwrite a user's email, names and active flag.",
)
def update_user(
    *,
    user_id: EntityId,
    payload: UserUpdate,
    service: UsersService = Depends(get_users_service),
) -> SuccessResponse[UserRead]:
    logger.info("request_update_user", user_id=user_id)
    user = service.update_user(user_id, payload)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"User {user_id} updated successfully",
        user_to_read(user),
    )


@router.delete(
    "/{user_id}",
    response_model=SuccessResponse[None],
    response_model_exclude_none=True,
    summary="Delete user",
    description="Soft-delete (deactivate) a user.",
)
def delete_user(
    *,
    user_id: EntityId,
    service: UsersService = Depends(get_users_service),
) -> SuccessResponse[None]:
    logger.info("request_delete_user", user_id=user_id)
    service.delete_user(user_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"User {user_id} has been successfully deactivated",
    )
