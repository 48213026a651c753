# app/core/exceptions.py

"""
Application error types and the exception handlers that turn them into
responses.

Every client-visible failure has the same JSON body:

    {"status": 404, "message": "Record not found", "details": ["..."]}

Handlers and services raise an `AppError` subclass; `register_exception_handlers`
installs the single place where errors become HTTP responses.
"""

import logging
from typing import List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


# =============================================================================
# 1. Error types
# =============================================================================
class AppError(Exception):
    """Error carrying an HTTP status code, a message and a list of details."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, *details: str, message: Optional[str] = None, status_code: Optional[int] = None):
        self.details: List[str] = list(details)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message, *self.details)

    def to_dict(self) -> dict:
        return {"status": self.status_code, "message": self.message, "details": self.details}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class ConflictError(AppError):
    """Unique-constraint violations (e.g. duplicate email)."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Record not found"


class InternalError(AppError):
    pass


# =============================================================================
# 2. Helpers
# =============================================================================
def format_validation_errors(errors: Sequence[dict]) -> List[str]:
    """
    Flattens pydantic error dicts into "field: message" strings, keeping every
    failure instead of only the first.
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) if loc else "body"
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return messages


def error_response(error: AppError) -> JSONResponse:
    headers = None
    if error.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=error.status_code, content=error.to_dict(), headers=headers)


# =============================================================================
# 3. Handlers
# =============================================================================
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("%s %s -> %d %s %s", request.method, request.url.path, exc.status_code, exc.message, exc.details)
    return error_response(exc)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(ValidationError(*format_validation_errors(exc.errors())))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing errors raised by the framework itself (unknown path, wrong method).
    error = AppError(str(exc.detail), message=_reason(exc.status_code), status_code=exc.status_code)
    response = error_response(error)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalError("An unexpected error occurred"))


def _reason(status_code: int) -> str:
    reasons = {
        status.HTTP_400_BAD_REQUEST: "Bad request",
        status.HTTP_401_UNAUTHORIZED: "Unauthorized",
        status.HTTP_403_FORBIDDEN: "Forbidden",
        status.HTTP_404_NOT_FOUND: "Not found",
        status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    }
    return reasons.get(status_code, "Internal Server Error" if status_code >= 500 else "Error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
