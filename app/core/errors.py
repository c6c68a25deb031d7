"""
Global exception handlers for the form submission API.

Unhandled exceptions are logged with their full traceback and answered with a
sanitized 500 body so internals never leak to the browser form.

Usage:
    # In main.py
    from app.core.errors import register_exception_handlers
    register_exception_handlers(app)
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler for unhandled exceptions.

        - Logs the full traceback for debugging
        - Returns a generic error message to prevent info leakage
        - In debug mode, includes more details
        """
        logger.error(
            "Unhandled exception on %s %s:\n%s",
            request.method,
            request.url.path,
            "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            ),
        )

        if settings.DEBUG:
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "Internal Server Error",
                    "error_type": type(exc).__name__,
                    "message": str(exc),
                    "path": request.url.path,
                },
            )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal Server Error",
                "message": "An unexpected error occurred. Please try again later.",
            },
        )
