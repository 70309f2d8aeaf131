"""
Global exception handlers that map failures to standardized HTTP error responses.

Services subclass GlobalExceptionHandlerBase, add their own rules and call
``register(app)``. Starlette resolves a handler by walking the exception's MRO,
so the most specific registered type wins and ``Exception`` is reached last.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from service_common.api.responses import (
    get_bad_request,
    get_internal_server_error,
    get_not_found,
    get_unauthorized,
)
from service_common.errors import DomainValidationError

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[[Request, Exception], JSONResponse]

# Leading location entries that name the request part, not the field
_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}

# Used when a validation error carries no field violations
INVALID_REQUEST_MESSAGE = "Invalid request"


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts)


def field_error_messages(errors: Iterable[dict[str, Any]]) -> set[str]:
    """Format each field violation as ``"<field>: <message>"``."""
    return {f"{_field_name(error.get('loc', ()))}: {error.get('msg', '')}" for error in errors}


class GlobalExceptionHandlerBase:
    """
    Base class for application-wide exception handling.

    Registered by default:
    - RequestValidationError / pydantic ValidationError -> 400 with one message per field
    - DomainValidationError -> 400 with the exception message
    - HTTPException raised by the framework -> closest of 404/401/400/500
    - Exception -> 500

    Not-found and unauthorized errors are domain-specific; subclasses map their
    own exception types to ``handle_input_not_found_errors`` and
    ``handle_unauthorized_errors`` by extending ``rules()``.
    """

    def handle_input_not_found_errors(self, request: Request, exc: Exception) -> JSONResponse:
        return get_not_found(exc, request)

    def handle_custom_input_errors(self, request: Request, exc: Exception) -> JSONResponse:
        return get_bad_request(exc, request)

    def handle_unauthorized_errors(self, request: Request, exc: Exception) -> JSONResponse:
        return get_unauthorized(exc, request)

    def handle_request_validation_error(
        self, request: Request, exc: RequestValidationError | ValidationError
    ) -> JSONResponse:
        errors = field_error_messages(exc.errors())
        if not errors:
            return get_bad_request(INVALID_REQUEST_MESSAGE, request)
        return get_bad_request(exc, request, errors)

    def handle_http_exception(
        self, request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Fold framework HTTP errors (unknown route, missing credentials, ...) into the fixed categories."""
        message = exc.detail if isinstance(exc.detail, str) else str(exc)
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            response = get_not_found(message, request)
        elif exc.status_code == status.HTTP_401_UNAUTHORIZED:
            response = get_unauthorized(message, request)
        elif 400 <= exc.status_code < 500:
            response = get_bad_request(message, request)
        else:
            response = get_internal_server_error(message, request)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return get_internal_server_error(exc, request)

    def rules(self) -> list[tuple[type[Exception], ExceptionHandler]]:
        """Exception types and their handlers, most specific first."""
        return [
            (RequestValidationError, self.handle_request_validation_error),
            (ValidationError, self.handle_request_validation_error),
            (DomainValidationError, self.handle_custom_input_errors),
            (StarletteHTTPException, self.handle_http_exception),
            (Exception, self.handle_exception),
        ]

    def register(self, app: FastAPI) -> None:
        """Register every rule on the FastAPI app."""
        for exc_class, handler in self.rules():
            app.add_exception_handler(exc_class, handler)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the baseline handlers on a FastAPI app."""
    GlobalExceptionHandlerBase().register(app)
