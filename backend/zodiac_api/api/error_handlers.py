"""Error Handlers - global exception handlers for the zodiac API.

Invariants:
    - ZodiacError → flat JSON {"error": message[, "details": [...]]} with its http_status
    - RequestValidationError → 400 in the same shape as InputValidationError
    - Exception (catch-all) → 500 {"error": "Internal server error"}, never leaks internals

Design Decisions:
    - Three-layer handler: domain (ZodiacError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so create_app() stays a short wiring function
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from zodiac_api.core.errors import (
    INTERNAL_ERROR_MESSAGE, ZodiacError, InputValidationError, ErrorSeverity,
)

logger = logging.getLogger(__name__)



def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_zodiac_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_zodiac_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ZodiacError)
    async def zodiac_error_handler(request: Request, exc: ZodiacError):
        """Handle all zodiac domain/infrastructure errors."""
        log = (
            logger.warning
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logger.error
        )
        log(
            f"ZodiacError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
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
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the validation envelope from Pydantic errors."""
    details = []
    for e in exc.errors():
        field = ".".join(str(loc) for loc in e["loc"] if loc != "body")
        details.append(f"{field}: {e['msg']}" if field else e["msg"])
    return InputValidationError(details).to_response()
