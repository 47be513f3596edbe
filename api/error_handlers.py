"""Global exception handlers.

Whatever escapes a route is still answered with the standard
``{code, message, data}`` envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from api.responses import respond
from core.codes import Code

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON bodies and mistyped parameters are binding errors."""
        detail = "; ".join(error.get("msg", "") for error in exc.errors())
        logger.error(f"Invalid request on {request.url.path}: {detail}")
        return respond(Code.BINDING_ERROR, detail)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return respond(Code.INTERNAL_ERROR)
