"""Error Handlers — render every failure as the Geometry error envelope.

Invariants:
    - GeometryError → its own http_status (400 bad body or dimension, 404 unknown
      cube/cylinder id, 500 storage or unexpected failure) with to_response()
    - RequestValidationError (unparseable id, non-integer sideLength,
      non-finite radius/height) → 400 VALIDATION_ERROR with per-field details
    - Anything else → 500 INTERNAL_ERROR without exception text
    - 5xx logged at ERROR, 4xx at WARNING, with error_code and path extras
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from geometry.core.errors import GeometryError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the Geometry, validation and catch-all handlers on the app."""
    _register_geometry_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_geometry_error_handler(app: FastAPI) -> None:
    """Register the handler for GeometryError raised by routes or repositories."""

    @app.exception_handler(GeometryError)
    async def geometry_error_handler(request: Request, exc: GeometryError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "entity_id": exc.context.entity_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register the 400 handler for bodies and path ids pydantic cannot parse."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Rejected {request.method} {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register the last-resort 500 handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """One details entry per failing field, e.g. ``body.sideLength``."""
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
