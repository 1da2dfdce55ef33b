"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for the application exceptions,
translating them into HTTP responses. Messages for 401 and 500 are generic
so a response never reveals which credential was wrong or which
collaborator failed.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from jwtgate.core.exceptions import (
    ForbiddenError,
    InternalError,
    JwtGateError,
    NotFoundError,
    PasswordValidationError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "not_found_error_handler",
    "unauthorized_error_handler",
    "forbidden_error_handler",
    "password_validation_error_handler",
    "validation_error_handler",
    "internal_error_handler",
    "jwtgate_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handles `NotFoundError`, returning a `404 Not Found`."""
    logger.info("Resource not found", error=exc.code, path=request.url.path)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def unauthorized_error_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    """Handles `UnauthorizedError`, returning a `401 Unauthorized`.

    Unknown usernames and wrong passwords reach this handler alike and produce
    the same body.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
    )


async def forbidden_error_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    """Handles `ForbiddenError`, returning a `403 Forbidden`."""
    logger.warning(
        "Access forbidden",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.message})


async def password_validation_error_handler(
    request: Request, exc: PasswordValidationError
) -> JSONResponse:
    """Handles `PasswordValidationError`, returning a `422` with every failure.

    The ``detail`` field carries the failures joined by newlines; ``errors``
    lists them individually.
    """
    logger.info("Password rejected by policy", failure_count=len(exc.failures), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "errors": exc.failures},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message},
    )


async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    """Handles `InternalError`, returning a generic `500`."""
    logger.error(
        "Internal error",
        error=exc.code,
        cause=type(exc.__cause__).__name__ if exc.__cause__ else None,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": InternalError().message},
    )


async def jwtgate_error_handler(request: Request, exc: JwtGateError) -> JSONResponse:
    """Fallback for any `JwtGateError` without a dedicated handler."""
    logger.error("Unhandled application error", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": InternalError().message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers the application exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so the base
    ``JwtGateError`` handler only applies when no subclass handler matches.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_error_handler)
    app.add_exception_handler(PasswordValidationError, password_validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(JwtGateError, jwtgate_error_handler)
