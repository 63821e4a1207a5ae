"""Mapping from domain errors to HTTP responses.

Every error body has the shape ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from qna.domain.error import (
    AuthenticationError,
    DomainError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from qna.util.jwt import JWTError

# Most specific first
ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidOperationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: Exception) -> int:
    """HTTP status for a domain or auth error; 400 for anything unlisted."""
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    code = status_for(exc)
    logfire.warn(
        "Request failed",
        path=request.url.path,
        status_code=code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(code, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Collapse FastAPI's validation detail into a single message."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = f"{location}: {first.get('msg')}" if location else first["msg"]
    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unexpected error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
