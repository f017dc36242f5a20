"""
Error taxonomy and the exception handlers that turn errors into envelopes.

Status conventions: validation, conflict, lookup and credential failures on
the signup/login paths answer 400; a missing or invalid bearer token answers
401; anything unexpected answers 500 with a sanitized error code.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.responses import ErrorDetail, respond_error
from config.constants import INTERNAL_ERROR_CODE, Messages

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map directly onto an error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = Messages.ERROR

    def __init__(self, message: Optional[str] = None, detail: ErrorDetail = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = Messages.VALIDATION_ERROR

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None) -> None:
        super().__init__(message, detail=errors)
        self.errors = errors


class ConflictError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = Messages.USER_EXISTS


class NotFoundError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = Messages.NOT_FOUND


class InvalidCredentialsError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = Messages.INVALID_PASSWORD


class AuthenticationError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = Messages.INVALID_TOKEN

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = Messages.INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message, detail=INTERNAL_ERROR_CODE)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure through the error envelope."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        return respond_error(exc.message, exc.status_code, exc.detail, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors: Dict[str, List[str]] = {}
        for err in exc.errors():
            loc = err.get("loc") or ("body",)
            part = loc[0] if loc[0] in ("body", "path", "query") else "body"
            part = "params" if part == "path" else part
            field = ".".join(str(p) for p in loc[1:])
            message = f"{field}: {err.get('msg')}" if field else str(err.get("msg"))
            errors.setdefault(part, []).append(message)
        return respond_error(Messages.VALIDATION_ERROR, status.HTTP_400_BAD_REQUEST, errors)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return respond_error(
            str(exc.detail),
            exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return respond_error(
            Messages.INTERNAL_SERVER_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_CODE,
        )
