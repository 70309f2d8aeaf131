"""
Bind error documents to HTTP responses, one helper per failure category.

``exc`` is the exception that was raised, or a plain message when the caller
already extracted one.
"""

from collections.abc import Iterable

from fastapi import Request
from fastapi.responses import JSONResponse

from service_common.schemas.error import ErrorResponse
from service_common.services.error_response import (
    create_bad_request_error_response,
    create_internal_server_error_response,
    create_not_found_error_response,
    create_unauthorized_error_response,
)


def _json_response(body: ErrorResponse) -> JSONResponse:
    """Return the error document as JSON under its own status code."""
    return JSONResponse(status_code=body.status, content=body.model_dump(mode="json"))


def get_not_found(exc: Exception | str, request: Request) -> JSONResponse:
    return _json_response(create_not_found_error_response(exc, request.url.path))


def get_bad_request(
    exc: Exception | str, request: Request, errors: Iterable[str] | None = None
) -> JSONResponse:
    """400 response; ``errors`` replaces the exception message when given."""
    return _json_response(
        create_bad_request_error_response(exc, request.url.path, errors)
    )


def get_unauthorized(exc: Exception | str, request: Request) -> JSONResponse:
    return _json_response(create_unauthorized_error_response(exc, request.url.path))


def get_internal_server_error(exc: Exception | str, request: Request) -> JSONResponse:
    return _json_response(
        create_internal_server_error_response(exc, request.url.path)
    )
