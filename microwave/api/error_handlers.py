"""Error Handlers — global exception handlers for the microwave API.

Invariants:
    - MicrowaveError → structured JSON with error code, message, severity
    - RequestValidationError → same envelope plus field-level details
    - Exception (catch-all) → same envelope, never leaks internal details
    - Every error body carries code, message, category, severity, timestamp

Design Decisions:
    - Three-layer handler: domain (MicrowaveError), validation (Pydantic), catch-all
    - Domain and validation errors logged at WARNING, unhandled ones at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from microwave.core.errors import ErrorCategory, ErrorSeverity, MicrowaveError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_microwave_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_microwave_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(MicrowaveError)
    async def microwave_error_handler(request: Request, exc: MicrowaveError):
        """Handle all microwave domain errors."""
        logger.warning(
            f"MicrowaveError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "session_id": exc.context.session_id,
                "program_identifier": exc.context.program_identifier,
            },
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
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logger.warning(
            f"Request rejected on {request.url.path}: {len(details)} invalid field(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        body = _envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )
        body["error"]["details"] = details
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. The response carries no exception text."""
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    """Same shape as MicrowaveError.to_response() for errors raised outside core."""
    return MicrowaveError(message, code, category, severity).to_response()
