"""Error Handlers: global exception handlers that always emit the error envelope.

Invariants:
    - AppError -> its http_status with {"success": false, "error": message}
    - RequestValidationError -> 400 envelope with joined field messages
    - StarletteHTTPException (unknown route, 405, ...) -> envelope, status passed through
    - Exception (catch-all) -> 500 generic envelope, never leaks internal details
    - Every handler logs before responding: warning for 4xx, error for 5xx
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError
from app.schemas.envelope import fail

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_app_error_handler(app: FastAPI) -> None:
    """Register EdgeCRUD domain/store error handler."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(
                f"AppError: {exc.message} (cause: {exc.__cause__!s})",
                extra=extra, exc_info=exc,
            )
        else:
            logger.warning(f"AppError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register FastAPI request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=fail(_join_validation_messages(exc)),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (404 fallback, 405, ...)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"status_code": exc.status_code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=fail("Internal Server Error"),
        )


def _join_validation_messages(exc: RequestValidationError) -> str:
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return "; ".join(parts) or "Invalid request data"
