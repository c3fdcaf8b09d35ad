"""
ecommerce_http_api/schemas/users.py

Pydantic models for the "users" HTTP API.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from .common import APIModel


UserID = int


class UserBase(APIModel):
    """
    Fields a client may set on a user.
    """

    name: str = Field(..., description="First name", examples=["Jorge"])
    last_name: str = Field(..., description="Last name", examples=["Avila"])
    email: str = Field(
        ...,
        description="Email address; must be unique across users.",
        examples=["jorge@example.com"],
    )
    active: bool = Field(True, description="False once the user is soft-deleted.")


class UserCreate(UserBase):
    """
    Payload for creating a user. The id and creation date are assigned by
    the server.
    """


class UserUpdate(UserBase):
    """
    Full-field update payload: email, name, last name and active flag are
    all overwritten.
    """


class UserRead(UserBase):
    """
    User representation as returned by the API.
    """

    id: UserID = Field(..., description="Database identifier")
    create_date: date = Field(..., description="Date the user was created")


__all__ = ["UserID", "UserBase", "UserCreate", "UserUpdate", "UserRead"]
