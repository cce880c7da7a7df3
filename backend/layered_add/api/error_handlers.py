"""Error Handlers — map exceptions escaping the routes to JSON error envelopes.

Invariants:
    - LayeredAddError subclasses answer with their own http_status (503 fetch, 504 timeout)
    - Request validation failures answer 400 with field-level details
    - Anything else answers 500 INTERNAL_ERROR; the exception text never reaches the client
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from layered_add.core.errors import (
    ErrorCategory, ErrorSeverity, LayeredAddError, error_envelope,
)

logger = logging.getLogger(__name__)


async def fetch_failure_response(request: Request, exc: LayeredAddError):
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def invalid_request_response(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def unexpected_error_response(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


EXCEPTION_HANDLERS = {
    LayeredAddError: fetch_failure_response,
    RequestValidationError: invalid_request_response,
    Exception: unexpected_error_response,
}


def register_error_handlers(app: FastAPI) -> None:
    for exc_type, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_type, handler)
