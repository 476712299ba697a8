"""Global exception handlers for the Task Manager API.

Invariants:
    - RequestValidationError -> 400 problem details listing ``field: message``
    - Exception (catch-all) -> 500 problem details, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from api.controllers.controller_base import problem_response

log = logging.getLogger(__name__)

_LOCATION_SOURCES = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request model validation errors."""
        log.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return problem_response(400, "Validation Error", _format_validation_errors(exc))


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        log.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return problem_response(500, "Internal Server Error", "An unexpected error occurred")


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATION_SOURCES) or "body"
        messages.append(f"{field}: {error['msg']}")
    return "; ".join(messages)
