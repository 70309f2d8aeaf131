"""
Run data-access operations and remap their failures.

Repositories wrap their calls so callers only ever see the exception type
they chose:

    patient = execute(lambda: repo.get(db, patient_id), PatientRepositoryError)

A failure that already is the chosen type passes through untouched. Anything
else is re-raised as the chosen type with the original as ``__cause__``.
The chosen type is built from the message alone, or from (message, cause)
when its constructor takes both.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from service_common.core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _instantiate(
    exception_class: type[Exception], message: str, cause: Exception
) -> Exception:
    """Build ``exception_class`` from a message, or from (message, cause) when it requires both."""
    if not (isinstance(exception_class, type) and issubclass(exception_class, Exception)):
        raise TypeError(f"{exception_class!r} is not an exception class")
    try:
        return exception_class(message)
    except TypeError:
        return exception_class(message, cause)


def _remap(exc: Exception, exception_class: type[Exception]) -> Exception:
    """Build the exception to raise in place of ``exc``."""
    if isinstance(exception_class, type) and isinstance(exc, exception_class):
        return exc
    try:
        remapped = _instantiate(exception_class, settings.db_operation_failure_message, exc)
    except Exception as construction_error:
        name = getattr(exception_class, "__qualname__", repr(exception_class))
        module = getattr(exception_class, "__module__", None)
        if module and module != "builtins":
            name = f"{module}.{name}"
        logger.warning(
            "Could not instantiate %s while remapping %s: %s",
            name,
            type(exc).__name__,
            construction_error,
        )
        remapped = RuntimeError(f"Could not instantiate exception of type: {name}")
    else:
        logger.debug("Remapping %s to %s", type(exc).__name__, exception_class.__name__)
    return remapped


def execute(operation: Callable[[], T], exception_class: type[Exception]) -> T:
    """
    Execute a database operation, raising ``exception_class`` if it fails.

    Args:
        operation: Zero-argument callable doing the work
        exception_class: Exception type callers should see; built from a
            message, or from (message, cause)

    Returns:
        Whatever ``operation`` returns

    Raises:
        exception_class: The operation failed. The original exception is
            re-raised as-is when it already is an ``exception_class``,
            otherwise it becomes the ``__cause__`` of a new one.
        RuntimeError: ``exception_class`` could not be instantiated; its
            ``__cause__`` is the original exception.
    """
    try:
        return operation()
    except Exception as exc:
        remapped = _remap(exc, exception_class)
        if remapped is exc:
            raise
        raise remapped from exc


async def execute_async(
    operation: Callable[[], Awaitable[T]], exception_class: type[Exception]
) -> T:
    """Async variant of ``execute`` for coroutine-based data access."""
    try:
        return await operation()
    except Exception as exc:
        remapped = _remap(exc, exception_class)
        if remapped is exc:
            raise
        raise remapped from exc
