# contractkit/assumes.py
"""
Assumes - checks for conditions the library itself guarantees.

A failed assumption is never the caller's fault: it means the library has a
bug. The raised exception type is private to this module so that ordinary
`except ArgumentError` handlers never match it; it should propagate to a
top-level crash/telemetry handler, which can recognise it with
contractkit.is_internal_error().

    >>> from contractkit import assumes
    >>> node = assumes.not_null(self._index.get(key))
    >>> assumes.true(len(queue) <= capacity, "queue grew past {0}", capacity)

Every failure is logged at ERROR before it is raised.
"""

from __future__ import annotations

from typing import Any, Iterable, NoReturn, Optional, Type, TypeVar

from contractkit.exceptions import ContractError, ErrorKind
from contractkit.formatting import safe_format
from contractkit.logging.logger import get_logger
from contractkit.logging.tags import INVARIANT
from contractkit.messages import get_message_catalog

logger = get_logger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Iterable[Any])


class _InternalError(ContractError):
    """
    An internal assumption failed.

    Not exported: this is not meant to be caught by anything but a
    top-level handler.
    """

    kind = ErrorKind.INTERNAL_INVARIANT

    def __init__(self, message: Optional[str] = None):
        super().__init__(message if message is not None else get_message_catalog().internal_error)


def _internal_error(
    message: Optional[str] = None,
    *args: Any,
    cause: Optional[BaseException] = None,
) -> _InternalError:
    if message is not None and args:
        message = safe_format(message, *args)

    error = _InternalError(message)
    error.__cause__ = cause
    logger.error(f"{INVARIANT} {error}")
    return error


# =============================================================================
# Conditions
# =============================================================================


def true(condition: bool, message: Optional[str] = None, *args: Any) -> None:
    """Raise an internal error if condition is false."""
    __tracebackhide__ = True
    if not condition:
        raise _internal_error(message, *args)


def false(condition: bool, message: Optional[str] = None, *args: Any) -> None:
    """Raise an internal error if condition is true."""
    __tracebackhide__ = True
    if condition:
        raise _internal_error(message, *args)


# =============================================================================
# Values
# =============================================================================


def not_null(value: Optional[T]) -> T:
    """Raise an internal error if value is None; return value otherwise."""
    __tracebackhide__ = True
    if value is None:
        raise _internal_error()
    return value


def null(value: Any) -> None:
    """Raise an internal error if value is not None."""
    __tracebackhide__ = True
    if value is not None:
        raise _internal_error()


def not_null_or_empty(value: Optional[str]) -> str:
    """Raise an internal error if text is None or empty."""
    __tracebackhide__ = True
    if not value:
        raise _internal_error()
    return value


def not_null_or_empty_sequence(values: Optional[S]) -> S:
    """Raise an internal error if values is None or yields nothing."""
    __tracebackhide__ = True
    if values is None:
        raise _internal_error()
    for _ in values:
        return values
    raise _internal_error()


def is_instance(value: Any, expected_type: Type[T]) -> T:
    """Raise an internal error unless value is an instance of expected_type."""
    __tracebackhide__ = True
    if not isinstance(value, expected_type):
        raise _internal_error(
            get_message_catalog().unexpected_type,
            getattr(expected_type, "__name__", expected_type),
            type(value).__name__,
        )
    return value


def present(component: Optional[T], name: Optional[str] = None) -> T:
    """
    Raise an internal error if a required component is missing.

    For collaborators the library wires up itself (plugins, services looked
    up from a registry); a missing one means the wiring is broken.
    """
    __tracebackhide__ = True
    if component is None:
        raise _internal_error(get_message_catalog().component_missing, name or "<unnamed>")
    return component


# =============================================================================
# Unconditional
# =============================================================================


def fail(message: Optional[str] = None, cause: Optional[BaseException] = None) -> NoReturn:
    """Always raise an internal error, optionally chained to cause."""
    __tracebackhide__ = True
    raise _internal_error(message, cause=cause)


def not_reachable() -> NoReturn:
    """Mark code that must never run."""
    __tracebackhide__ = True
    raise _internal_error(get_message_catalog().unreachable)


__all__ = [
    "true",
    "false",
    "not_null",
    "null",
    "not_null_or_empty",
    "not_null_or_empty_sequence",
    "is_instance",
    "present",
    "fail",
    "not_reachable",
]
