"""Error Handlers — global exception handlers for the string service API.

Invariants:
    - StringServiceError (DecodeError) → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Two-layer handler: domain (StringServiceError), catch-all (Exception)
    - EmptyInputError never reaches here: endpoints encode it in-band
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from stringsvc.core.errors import StringServiceError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register string service error handler."""

    @app.exception_handler(StringServiceError)
    async def service_error_handler(request: Request, exc: StringServiceError):
        """Handle all string service errors raised outside an endpoint."""
        logger.warning(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
