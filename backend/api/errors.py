"""
Application-level error handling.

Module exceptions carry their HTTP status; the handlers here turn them
into JSON bodies. Routers that answer with {"success": false, ...} mark
the request through the use_success_envelope dependency.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import NssError

from .models.errors import EnvelopeErrorResponse, ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Location prefixes FastAPI adds to validation error locs
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def use_success_envelope(request: Request) -> None:
    """Router dependency: answer errors on this route with the success envelope."""
    request.state.success_envelope = True


def error_body(request: Request, message: str) -> dict[str, Any]:
    """Build the error body in the format the route expects."""
    if getattr(request.state, "success_envelope", False):
        return EnvelopeErrorResponse(message=message).model_dump()
    return ErrorResponse(message=message).model_dump()


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """
    Render pydantic errors as one readable line.

    Example: "name: Field required; amount: Input should be a valid number"
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PREFIXES]
        field = ".".join(loc)
        msg = error.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


async def nss_error_handler(request: Request, exc: NssError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.to_dict())
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content=error_body(request, message))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body(request, format_validation_errors(list(exc.errors()))),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body(request, INTERNAL_ERROR_MESSAGE))


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(NssError, nss_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
