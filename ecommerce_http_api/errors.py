# ecommerce_http_api/errors.py

"""
Centralized translation of failures into the error envelope.

Services raise domain exceptions and never build HTTP responses; the
handlers registered here are the single place where a failure becomes a
status code plus an ``ErrorResponse`` body:

    ResourceNotFoundError        -> 404 "Not Found"
    InactiveResourceError        -> 400 "Bad Request"
    invalid request body         -> 400 "Validation Failed" (+ details)
    path/query type mismatch     -> 400 "Bad Request"
    routing errors (404/405)     -> their own status, reason phrase
    anything else                -> 500 "Internal Server Error"
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecommerce_http_api.exceptions import InactiveResourceError, ResourceNotFoundError
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.schemas.common import ErrorResponse

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# pydantic error types raised when a path/query string cannot be coerced
_EXPECTED_TYPES: Dict[str, str] = {
    "int_parsing": "int",
    "int_from_float": "int",
    "float_parsing": "float",
    "bool_parsing": "bool",
    "decimal_parsing": "Decimal",
    # in range for Python but not for a 64-bit column
    "less_than_equal": "int",
    "greater_than_equal": "int",
}

_PARAMETER_LOCATIONS = ("path", "query")

# storage failures (IntegrityError, ...) and arithmetic on missing prices
_INTERNAL_ERRORS = (SQLAlchemyError, TypeError)


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Optional[List[str]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        details=details,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _field_path(loc: Sequence[Any]) -> str:
    # ("body", 0, "productId") -> "0.productId"; a bare ("body",) -> "body"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _type_mismatch_message(err: Dict[str, Any]) -> str:
    loc = err.get("loc") or ()
    name = loc[-1] if loc else "unknown"
    expected = _EXPECTED_TYPES.get(err.get("type", ""), "unknown")
    return (
        f"Invalid value '{err.get('input')}' for parameter '{name}'. "
        f"Expected type: {expected}"
    )


async def resource_not_found_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    logger.error("resource_not_found", error=exc.message, path=request.url.path)
    return error_response(request, status.HTTP_404_NOT_FOUND, "Not Found", exc.message)


async def inactive_resource_handler(
    request: Request, exc: InactiveResourceError
) -> JSONResponse:
    logger.warning(
        "inactive_resource_operation",
        error=exc.message,
        path=request.url.path,
    )
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "Bad Request", exc.message
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Split FastAPI's validation errors into the two categories clients see:
    a path/query value of the wrong type, or an invalid request body.
    """
    errors = list(exc.errors())

    if errors and all(
        (e.get("loc") or ("",))[0] in _PARAMETER_LOCATIONS for e in errors
    ):
        message = _type_mismatch_message(errors[0])
        logger.error("type_mismatch", error=message, path=request.url.path)
        return error_response(
            request, status.HTTP_400_BAD_REQUEST, "Bad Request", message
        )

    details = [f"{_field_path(e.get('loc') or ())}: {e.get('msg')}" for e in errors]
    logger.error("validation_failed", path=request.url.path, details=details)
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
        "Input validation failed",
        details,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Routing-level errors (unknown path, wrong method) keep their status but
    use the common envelope.
    """
    try:
        category = HTTPStatus(exc.status_code).phrase
    except ValueError:
        category = "Error"
    logger.warning(
        "http_error",
        status=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    response = error_response(request, exc.status_code, category, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last resort: log with traceback, answer with a generic message only.
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        GENERIC_ERROR_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(InactiveResourceError, inactive_resource_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    # Known internal failures are answered inside the middleware stack so
    # the response still passes through CORS; Exception is the last resort.
    for exc_class in _INTERNAL_ERRORS:
        app.add_exception_handler(exc_class, unhandled_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "error_response",
    "register_exception_handlers",
]
