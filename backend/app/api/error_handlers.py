"""Error Handlers — global exception handlers for the intake API.

Invariants:
    - IntakeError → {message, errors?} with the error's HTTP status
    - Exception (catch-all) → 500 {message}; never leaks internal details
    - 4xx domain errors log at WARNING, 5xx at ERROR with the internal detail

Design Decisions:
    - Two-layer handler: domain (IntakeError), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import GENERIC_SERVER_MESSAGE, IntakeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_intake_error_handler(app)
    _register_generic_error_handler(app)


def _register_intake_error_handler(app: FastAPI) -> None:
    """Register intake domain/infrastructure error handler."""

    @app.exception_handler(IntakeError)
    async def intake_error_handler(request: Request, exc: IntakeError):
        """Handle all intake domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            detail = getattr(exc, "detail", exc.message)
            logger.error(f"IntakeError: {detail}", extra=extra)
        else:
            logger.warning(f"Registration rejected: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_SERVER_MESSAGE},
        )
