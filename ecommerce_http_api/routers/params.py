# ecommerce_http_api/routers/params.py

"""
Path parameter types shared by the resource routers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path

from ecommerce_http_api.schemas.common import INT64_MAX, INT64_MIN

# Out-of-range ids are rejected as a type mismatch before they reach the
# database.
EntityId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX, description="Database identifier")]


__all__ = ["EntityId", "INT64_MAX", "INT64_MIN"]
