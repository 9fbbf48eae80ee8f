"""
Translation of directory failures into HTTP responses.

Handlers are registered on the application by ``register_exception_handlers``.
Each failure kind maps to a fixed status code and a short plain-text
body; the upstream message is logged but not echoed to the client.
Inbound validation errors become a ``400`` with a ``{field: message}``
object.
"""

import logging
from typing import Dict, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import DirectoryError, FailureKind

logger = logging.getLogger(__name__)

FAILURE_RESPONSES: Dict[FailureKind, Tuple[int, str]] = {
    FailureKind.UPSTREAM_RATE_LIMITED: (status.HTTP_429_TOO_MANY_REQUESTS, "Rate limit Applied: Too Many Request"),
    FailureKind.UPSTREAM_REJECTED: (status.HTTP_400_BAD_REQUEST, "Invalid request data"),
    FailureKind.UPSTREAM_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Requested resource not found"),
    FailureKind.UPSTREAM_FAULT: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    FailureKind.UPSTREAM_UNAVAILABLE: (status.HTTP_503_SERVICE_UNAVAILABLE, "Upstream service unavailable"),
    FailureKind.DECODE_ERROR: (status.HTTP_502_BAD_GATEWAY, "Invalid response from upstream service"),
}


async def directory_error_handler(request: Request, exc: DirectoryError) -> PlainTextResponse:
    status_code, body = FAILURE_RESPONSES[exc.kind]
    logger.error("%s %s failed with %s: %s", request.method, request.url.path, exc.kind.value, exc.message)
    return PlainTextResponse(body, status_code=status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors: Dict[str, str] = {}
    for error in exc.errors():
        location = error.get("loc") or ("body",)
        field_errors[str(location[-1])] = error.get("msg", "Invalid value")
    logger.error("Validation failed for %s %s: %s", request.method, request.url.path, field_errors)
    return JSONResponse(field_errors, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the directory and validation handlers to ``app``."""
    app.add_exception_handler(DirectoryError, directory_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
