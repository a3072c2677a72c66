"""Render every API error with the ``{"message": ...}`` envelope."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import ValidationFailed

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation error"
SERVER_ERROR_MESSAGE = "Server Error"

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def _field_name(loc: Sequence[object]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in {"body", "query", "path"}:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _error_message(error: dict) -> str:
    message = str(error.get("msg", "Invalid value"))
    if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        return message[len(_PYDANTIC_VALUE_ERROR_PREFIX) :]
    return message


def validation_error_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": VALIDATION_MESSAGE, "errors": errors},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ())), []).append(
            _error_message(error)
        )
    return validation_error_response(errors)


async def validation_failed_handler(
    request: Request, exc: ValidationFailed
) -> JSONResponse:
    return validation_error_response(exc.errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        "Database failure while handling %s %s", request.method, request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that shape error responses."""

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_failure_handler)
