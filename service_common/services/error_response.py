"""
Build standardized error documents from failures.

Every function here is total: whatever the failure looks like, an
ErrorResponse with at least one message comes back.
"""

from collections.abc import Iterable

from service_common.core.config import settings
from service_common.errors import (
    BAD_REQUEST,
    CATEGORY_STATUS,
    INTERNAL_ERROR,
    NOT_FOUND,
    UNAUTHORIZED,
)
from service_common.schemas.error import ErrorResponse


def message_of(failure: object) -> str:
    """Return the failure's message, or the configured placeholder when it has none."""
    if failure is None:
        return settings.error_message_placeholder
    if isinstance(failure, KeyError) and len(failure.args) == 1 and isinstance(failure.args[0], str):
        # str(KeyError) quotes its argument
        return failure.args[0] or settings.error_message_placeholder
    try:
        message = str(failure)
    except Exception:
        # A broken __str__ must not stop the error document from being built
        return settings.error_message_placeholder
    return message or settings.error_message_placeholder


def classify(
    failure: object,
    path: str,
    status: int,
    messages: Iterable[str] | None = None,
) -> ErrorResponse:
    """
    Turn a failure into an ErrorResponse.

    Args:
        failure: The exception that was raised
        path: Path of the request being served
        status: HTTP status the document is keyed by
        messages: Optional detail messages; when given and non-empty they are
            used verbatim instead of the failure's own message

    Returns:
        ErrorResponse stamped with the current time
    """
    if messages is not None:
        details = frozenset(messages)
        if details:
            return ErrorResponse(messages=details, status=status, path=path)
    return ErrorResponse(messages={message_of(failure)}, status=status, path=path)


def create_not_found_error_response(failure: object, path: str) -> ErrorResponse:
    return classify(failure, path, CATEGORY_STATUS[NOT_FOUND])


def create_bad_request_error_response(
    failure: object, path: str, messages: Iterable[str] | None = None
) -> ErrorResponse:
    return classify(failure, path, CATEGORY_STATUS[BAD_REQUEST], messages)


def create_unauthorized_error_response(failure: object, path: str) -> ErrorResponse:
    return classify(failure, path, CATEGORY_STATUS[UNAUTHORIZED])


def create_internal_server_error_response(failure: object, path: str) -> ErrorResponse:
    return classify(failure, path, CATEGORY_STATUS[INTERNAL_ERROR])
