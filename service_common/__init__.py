"""Shared error handling for FastAPI services: uniform error documents and data-access error remapping."""

from service_common.api.exception_handlers import (
    GlobalExceptionHandlerBase,
    register_exception_handlers,
)
from service_common.db.operation import execute, execute_async
from service_common.errors import DomainError, DomainValidationError
from service_common.schemas.error import ErrorResponse
from service_common.schemas.pagination import ApplicationPage

__all__ = [
    "ApplicationPage",
    "DomainError",
    "DomainValidationError",
    "ErrorResponse",
    "GlobalExceptionHandlerBase",
    "execute",
    "execute_async",
    "register_exception_handlers",
]
