# ecommerce_http_api/schemas/common.py

from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase on the wire, snake_case accepted on input
    - build straight from ORM objects (``model_validate(orm_obj)``)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def envelope_timestamp() -> datetime:
    """Local time truncated to seconds, e.g. 2025-10-18T14:03:21."""
    return datetime.now().replace(microsecond=0)


# Ids and quantities are stored as signed 64-bit integers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Success envelope
# ---------------------------------------------------------------------------


class SuccessResponse(APIModel, Generic[T]):
    """
    Uniform envelope wrapped around every successful response.

    ``data`` is left out entirely for operations that return nothing
    (soft deletes); those routes serialize with ``exclude_none``.
    """

    timestamp: datetime = Field(default_factory=envelope_timestamp)
    status: int = Field(..., description="HTTP status code, repeated in the body.")
    message: str = Field(..., description="Human-readable outcome.")
    data: Optional[T] = Field(default=None, description="Operation payload.")

    @classmethod
    def of(cls, status: int, message: str, data: Optional[T] = None) -> "SuccessResponse[T]":
        return cls(status=status, message=message, data=data)


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    timestamp: datetime = Field(default_factory=envelope_timestamp)
    status: int = Field(..., description="HTTP status code.")
    error: str = Field(
        ...,
        description="Error category, e.g. 'Not Found' or 'Validation Failed'.",
    )
    message: str = Field(..., description="Human-readable explanation of the error.")
    path: str = Field(..., description="Request path that produced the error.")
    details: Optional[List[str]] = Field(
        default=None,
        description="Per-field validation messages, when relevant.",
    )


__all__ = [
    "APIModel",
    "INT64_MAX",
    "INT64_MIN",
    "SuccessResponse",
    "ErrorResponse",
    "envelope_timestamp",
]
