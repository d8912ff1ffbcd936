"""
Error handling middleware.

Every failure leaves the service as {"error": <message>}.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobdesk.application.services.error_normalizer import (
    GENERIC_FALLBACK_MESSAGE,
    NormalizedError,
    error_normalizer,
)
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.auth_error import (
    AuthenticationError,
    PermissionDeniedError,
)
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.store_error import StoreError
from jobdesk.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(item) for item in error.get("loc", ()) if item not in ("body", "query", "path")
        )
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts) or "Invalid request"


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        message = _format_validation_errors(exc)
        logger.warning("Request validation error", error=message, path=request.url.path)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.info("Not found", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.info("Authentication failed", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=401,
            content={"error": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(PermissionDeniedError)
    async def permission_error_handler(request: Request, exc: PermissionDeniedError):
        logger.info("Permission denied", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=403, content={"error": str(exc)})

    @app.exception_handler(NormalizedError)
    async def normalized_error_handler(request: Request, exc: NormalizedError):
        # Full detail was logged when the error was normalized
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        normalized = error_normalizer.normalize_exception(exc, "record")
        return JSONResponse(
            status_code=normalized.status_code, content={"error": normalized.message}
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        normalized = error_normalizer.normalize_exception(exc, "record")
        return JSONResponse(
            status_code=normalized.status_code, content={"error": normalized.message}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return JSONResponse(status_code=500, content={"error": GENERIC_FALLBACK_MESSAGE})
