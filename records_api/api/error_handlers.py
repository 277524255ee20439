"""Error Handlers — global exception handlers for the Record API.

Invariants:
    - Every error body is {"error": <string>}
    - RecordApiError → its own status; OperationError cause logged, never returned
    - RequestValidationError → 400 with field-level details
    - Unmatched routes (404/405 from routing or the static mount) → 404 "Route not found"
    - Exception (catch-all) → 500 "Server error", never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from records_api.core.errors import OperationError, RecordApiError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INVALID_REQUEST_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_record_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_record_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RecordApiError)
    async def record_error_handler(request: Request, exc: RecordApiError):
        """Handle all Record API domain/infrastructure errors."""
        extra = {"path": request.url.path, "method": request.method, **exc.log_extra()}
        if isinstance(exc, OperationError):
            logger.error(
                f"OperationError: {exc.message}", extra=extra, exc_info=exc.cause,
            )
        elif exc.http_status >= 500:
            logger.error(f"RecordApiError: {exc.message}", extra=extra)
        else:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Routing-level errors; 404 and 405 both mean no route matched."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": ROUTE_NOT_FOUND_MESSAGE},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": OperationError.PUBLIC_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 body for schema-level failures."""
    return {
        "error": INVALID_REQUEST_MESSAGE,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
