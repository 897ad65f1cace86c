"""Error Handlers — global exception handlers for the Delivery API.

Invariants:
    - DeliveryApiError → its http_status with the normalized {message, details?} body
    - RequestValidationError (malformed JSON, bad query types) → 400, normalized the same way
    - Exception (catch-all) → 500, never leaks internal details
    - Every failure passes through core/normalize_error.normalize_error exactly once

Design Decisions:
    - Three-layer handler: domain (DeliveryApiError), validation (FastAPI), catch-all (Exception)
    - 400/404 logged at WARNING, 5xx at ERROR: client mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import DeliveryApiError, ValidationFailure
from app.core.normalize_error import field_errors_from_pydantic, normalize_error

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DeliveryApiError)
    async def domain_error_handler(request: Request, exc: DeliveryApiError):
        """Handle validation, not-found, conflict and database failures."""
        body = normalize_error(exc)
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{request.method} {request.url.path} failed: {body['message']}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "entity": exc.context.entity,
                "entity_id": exc.context.entity_id,
            },
        )
        return JSONResponse(status_code=exc.http_status, content=body)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors raised by FastAPI before the route runs."""
        body = normalize_error(
            ValidationFailure.from_field_errors(
                field_errors_from_pydantic(list(exc.errors())),
            ),
        )
        logger.warning(
            f"Validation error on {request.url.path}: {body['message']}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — the normalized message is logged, never returned."""
        body = normalize_error(exc)
        logger.error(
            f"Unhandled exception on {request.url.path}: {body['message']}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )
