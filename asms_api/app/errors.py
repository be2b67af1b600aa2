"""
Error taxonomy for the service and the FastAPI handlers that turn it into
JSON error envelopes.

The chatbot endpoints answer with ``{"success": false, "message": ...}``,
every other endpoint with ``{"message": ...}``. Exception text from
unexpected failures is logged here and never sent to the client.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CHATBOT_PREFIX = "/api/chatbot"

_LOCATION_PREFIXES = {"body", "header", "query", "path", "cookie"}


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthFailure(ServiceError):
    """Bad credentials. The message never says which field was wrong."""

    status_code = 401
    default_message = "Invalid username or password"


class ValidationFailure(ServiceError):
    """Malformed or missing request fields"""

    status_code = 400
    default_message = "Bad request"


class InternalFailure(ServiceError):
    """Unexpected failure while processing a request"""

    status_code = 500
    default_message = "An error occurred processing your request"


def error_body(path: str, message: str) -> Dict[str, Any]:
    """Build the error envelope used by the endpoint group owning ``path``"""
    if path.startswith(CHATBOT_PREFIX):
        return {"success": False, "message": message}
    return {"message": message}


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationFailure.default_message

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Bad request: malformed JSON body"

    parts = [
        str(part) for part in first.get("loc", ())
        if not isinstance(part, int) and part not in _LOCATION_PREFIXES
    ]
    field = ".".join(parts) or "request body"

    if first.get("type") == "missing":
        return f"Bad request: {field} is required"
    return f"Bad request: invalid value for {field}"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request.url.path, exc.message),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.info(f"{request.method} {request.url.path} rejected (400): {message}")
    return JSONResponse(
        status_code=ValidationFailure.status_code,
        content=error_body(request.url.path, message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=InternalFailure.status_code,
        content=error_body(request.url.path, InternalFailure.default_message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error envelopes on ``app``"""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
