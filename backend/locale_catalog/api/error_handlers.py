"""Error Handlers — global exception handlers for the locale-catalog API.

Invariants:
    - LocalizationError → structured JSON with error code, message, severity
    - Catalog outages (503) carry a Retry-After header and the catalog state
      and operation under "details"
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LocalizationError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can mount the handlers on their own app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from locale_catalog.core.errors import LocalizationError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_localization_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_localization_error_handler(app: FastAPI) -> None:
    """Register locale-catalog error handler."""

    @app.exception_handler(LocalizationError)
    async def localization_error_handler(request: Request, exc: LocalizationError):
        """Handle all locale-catalog errors; catalog outages get a Retry-After."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        details = exc.context.debug_info or {}
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "record_kind": exc.context.record_kind,
                "country_code": exc.context.country_code,
                "culture": exc.context.culture,
                "catalog_state": details.get("state"),
                "operation": details.get("operation"),
            },
        )
        headers = None
        if exc.retry_after is not None:
            headers = {"Retry-After": str(exc.retry_after)}
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
