"""Error envelopes and FastAPI exception handlers.

Every error response has the shape `{"error": "...", "details": "..."}` (`details` optional).
Internal error details are logged, never returned to the client.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

BAD_REQUEST = "Bad Request: Invalid query parameter values or types"
INVALID_BODY = 'Invalid request body or missing "value" field'
INVALID_VALUE_TYPE = "Unprocessable Entity: Invalid data type for 'value' (must be string)"

# Body errors that mean "no usable body" rather than "wrong type".
_BODY_SHAPE_ERRORS = {"missing", "json_invalid", "model_type", "model_attributes_type", "dict_type"}


class ApiError(Exception):
    """An expected, client-facing failure with a fixed status code."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _is_body_error(err: dict[str, Any]) -> bool:
    loc = err.get("loc") or ()
    return bool(loc) and loc[0] == "body"


def _validation_status(errors: list[dict[str, Any]]) -> tuple[int, str]:
    body_errors = [e for e in errors if _is_body_error(e)]
    if not body_errors:
        return status.HTTP_400_BAD_REQUEST, BAD_REQUEST

    if any(e.get("type") == "json_invalid" for e in body_errors):
        return status.HTTP_400_BAD_REQUEST, "Bad Request: Invalid JSON format"
    if all(e.get("type") in _BODY_SHAPE_ERRORS for e in body_errors):
        return status.HTTP_400_BAD_REQUEST, INVALID_BODY
    return HTTP_422_UNPROCESSABLE, INVALID_VALUE_TYPE


def _first_error_message(errors: list[dict[str, Any]]) -> str | None:
    if not errors:
        return None
    err = errors[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg")


async def _handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.error, exc.details)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    status_code, message = _validation_status(errors)
    logger.info(
        "invalid request method=%s path=%s status=%d", request.method, request.url.path, status_code
    )
    return error_response(status_code, message, _first_error_message(errors))


async def _handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(exc.status_code, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


async def _handle_unexpected_error(request: Request, _exc: Exception) -> JSONResponse:
    # Handler boundary: never leak internals.
    logger.exception("request failed method=%s path=%s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_error_handlers(api: FastAPI) -> None:
    """Install the JSON error envelope for all error kinds."""

    api.add_exception_handler(ApiError, _handle_api_error)
    api.add_exception_handler(RequestValidationError, _handle_validation_error)
    api.add_exception_handler(StarletteHTTPException, _handle_http_error)
    api.add_exception_handler(Exception, _handle_unexpected_error)
