# contractkit/requires.py
"""
Requires - argument checks for values supplied by callers.

Each check either returns the value it was given (the very same object) or
raises an ArgumentError subclass naming the parameter, so checks can be used
inline:

    >>> from contractkit import requires
    >>> def open_store(path, names):
    ...     self.path = requires.not_null_or_whitespace(path, "path")
    ...     self.names = requires.not_null_empty_or_null_elements(names, "names")

Condition checks (argument, in_range) return None.

Checks are written to fail on the first violated condition and never delegate
to a broader check once the outcome is known; the order of the tests decides
which error kind surfaces.
"""

from __future__ import annotations

import ctypes
import uuid
from typing import Any, Iterable, NoReturn, Optional, TypeVar

from contractkit.exceptions import (
    ArgumentOutOfRangeError,
    EmptyArgumentError,
    InvalidArgumentError,
    NullArgumentError,
    NullElementArgumentError,
    WhitespaceArgumentError,
)
from contractkit.formatting import safe_format
from contractkit.logging.logger import get_logger
from contractkit.logging.tags import VALIDATION
from contractkit.messages import get_message_catalog

logger = get_logger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Iterable[Any])

EMPTY_UUID = uuid.UUID(int=0)

_NUL = "\0"


def _null(param_name: Optional[str]) -> NullArgumentError:
    logger.debug(f"{VALIDATION} None passed for {param_name!r}")
    return NullArgumentError(get_message_catalog().argument_null, param_name)


# =============================================================================
# Null Checks
# =============================================================================


def not_null(value: Optional[T], param_name: Optional[str]) -> T:
    """
    Raise if value is None.

    Returns:
        value, unchanged

    Raises:
        NullArgumentError: If value is None
    """
    __tracebackhide__ = True
    if value is None:
        raise _null(param_name)
    return value


def not_null_allow_structs(value: Optional[T], param_name: Optional[str]) -> T:
    """
    Raise if value is None.

    For generic callers that only know the value as some Optional[T], where
    T may be a plain value type (int, a frozen dataclass, a tuple) rather
    than a reference-like object. Falsy values such as 0 or () pass.

    Raises:
        NullArgumentError: If value is None
    """
    __tracebackhide__ = True
    return not_null(value, param_name)


def not_null_handle(handle: Any, param_name: Optional[str]) -> Any:
    """
    Raise if handle is None or the null address.

    Accepts a plain integer address, a ctypes typed pointer (POINTER(c_int)()
    is null), or a ctypes object whose .value is the address
    (c_void_p(None).value is None).

    Raises:
        NullArgumentError: If the handle is None, 0, or wraps a null address
    """
    __tracebackhide__ = True
    if handle is None or handle == 0:
        raise _null(param_name)
    if isinstance(handle, ctypes._Pointer):
        if not handle:
            raise _null(param_name)
    elif not isinstance(handle, int) and hasattr(handle, "value") and not handle.value:
        raise _null(param_name)
    return handle


# =============================================================================
# Text Checks
# =============================================================================


def not_null_or_empty(value: Optional[str], param_name: Optional[str]) -> str:
    """
    Raise if text is None, empty, or starts with a NUL character.

    A leading "\\0" is treated as empty so terminator-filled buffers that were
    decoded into text are rejected too.

    Raises:
        NullArgumentError: If value is None
        EmptyArgumentError: If value is "" or starts with "\\0"
    """
    __tracebackhide__ = True
    # Inline null check: do not delegate to not_null().
    if value is None:
        raise _null(param_name)

    if len(value) == 0 or value[0] == _NUL:
        logger.debug(f"{VALIDATION} Empty string passed for {param_name!r}")
        raise EmptyArgumentError(
            get_message_catalog().render("argument_empty_string", param_name), param_name
        )

    return value


def not_null_or_whitespace(value: Optional[str], param_name: Optional[str]) -> str:
    """
    Raise if text is None, empty, or only whitespace.

    Emptiness is diagnosed before whitespace: "" raises EmptyArgumentError,
    "   " raises WhitespaceArgumentError.

    Raises:
        NullArgumentError: If value is None
        EmptyArgumentError: If value is "" or starts with "\\0"
        WhitespaceArgumentError: If value consists only of whitespace
    """
    __tracebackhide__ = True
    if value is None:
        raise _null(param_name)

    if len(value) == 0 or value[0] == _NUL:
        logger.debug(f"{VALIDATION} Empty string passed for {param_name!r}")
        raise EmptyArgumentError(
            get_message_catalog().render("argument_empty_string", param_name), param_name
        )

    if value.isspace():
        logger.debug(f"{VALIDATION} Whitespace-only string passed for {param_name!r}")
        raise WhitespaceArgumentError(get_message_catalog().argument_whitespace, param_name)

    return value


# =============================================================================
# Sequence Checks
# =============================================================================
#
# These iterate the argument once and keep no copy. A one-shot iterator is
# consumed (partially or fully) by the check; pass a re-iterable collection
# if the elements are needed afterwards.


def not_null_or_empty_sequence(values: Optional[S], param_name: Optional[str]) -> S:
    """
    Raise if values is None or yields no elements.

    Only the first element is pulled.

    Raises:
        NullArgumentError: If values is None
        EmptyArgumentError: If values yields nothing
    """
    __tracebackhide__ = True
    if values is None:
        raise _null(param_name)

    for _ in values:
        return values

    logger.debug(f"{VALIDATION} Empty sequence passed for {param_name!r}")
    raise EmptyArgumentError(
        get_message_catalog().render("argument_empty_sequence", param_name), param_name
    )


def not_null_empty_or_null_elements(values: Optional[S], param_name: Optional[str]) -> S:
    """
    Raise if values is None, yields no elements, or yields a None element.

    The first None element raises immediately; emptiness is only reported
    once the whole sequence has been seen.

    Raises:
        NullArgumentError: If values is None
        NullElementArgumentError: If any element is None
        EmptyArgumentError: If values yields nothing
    """
    __tracebackhide__ = True
    if values is None:
        raise _null(param_name)

    has_elements = False
    for item in values:
        has_elements = True
        if item is None:
            logger.debug(f"{VALIDATION} None element in {param_name!r}")
            raise NullElementArgumentError(
                get_message_catalog().render("argument_null_element", param_name), param_name
            )

    if not has_elements:
        logger.debug(f"{VALIDATION} Empty sequence passed for {param_name!r}")
        raise EmptyArgumentError(
            get_message_catalog().render("argument_empty_sequence", param_name), param_name
        )

    return values


def null_or_not_null_elements(values: Optional[S], param_name: Optional[str]) -> Optional[S]:
    """
    Raise if values is present and yields a None element.

    None itself, and an empty sequence, are accepted.

    Raises:
        NullElementArgumentError: If any element is None
    """
    __tracebackhide__ = True
    if values is not None:
        for item in values:
            if item is None:
                logger.debug(f"{VALIDATION} None element in {param_name!r}")
                raise NullElementArgumentError(
                    get_message_catalog().render("argument_null_element", param_name), param_name
                )

    return values


# =============================================================================
# Identifier Checks
# =============================================================================


def not_empty(value: uuid.UUID, param_name: Optional[str]) -> uuid.UUID:
    """
    Raise if value is the all-zero UUID.

    Raises:
        EmptyArgumentError: If value == UUID(int=0)
    """
    __tracebackhide__ = True
    if value == EMPTY_UUID:
        logger.debug(f"{VALIDATION} Empty UUID passed for {param_name!r}")
        raise EmptyArgumentError(
            get_message_catalog().render("argument_empty_uuid", param_name), param_name
        )
    return value


# =============================================================================
# Condition Checks
# =============================================================================


def in_range(condition: bool, param_name: Optional[str], message: Optional[str] = None) -> None:
    """
    Raise ArgumentOutOfRangeError if condition is false.

    Examples:
        >>> requires.in_range(0 <= index < len(items), "index")
        >>> requires.in_range(timeout > 0, "timeout", "timeout must be positive")
    """
    __tracebackhide__ = True
    if not condition:
        fail_range(param_name, message)


def fail_range(param_name: Optional[str], message: Optional[str] = None) -> NoReturn:
    """
    Always raise ArgumentOutOfRangeError.

    The default out-of-range text is used when message is None or empty.
    """
    __tracebackhide__ = True
    logger.debug(f"{VALIDATION} Out of range value for {param_name!r}")
    if not message:
        message = get_message_catalog().argument_out_of_range
    raise ArgumentOutOfRangeError(message, param_name)


def argument(condition: bool, param_name: Optional[str], message: Optional[str], *args: Any) -> None:
    """
    Raise InvalidArgumentError if condition is false.

    message is a positional template ({0}, {1}, ...) when args are given,
    and is used as-is otherwise.

    Examples:
        >>> requires.argument(path.suffix == ".yaml", "path", "'{0}' is not a YAML file", path)
    """
    __tracebackhide__ = True
    if not condition:
        logger.debug(f"{VALIDATION} Invalid argument {param_name!r}")
        raise InvalidArgumentError(safe_format(message, *args) if args else message, param_name)


def fail(message: Optional[str], *args: Any) -> NoReturn:
    """
    Always raise InvalidArgumentError.

    With no args the error carries exactly message (even None).
    """
    __tracebackhide__ = True
    raise InvalidArgumentError(safe_format(message, *args) if args else message)


def fail_with_cause(cause: Optional[BaseException], message: Optional[str], *args: Any) -> NoReturn:
    """Always raise InvalidArgumentError chained to cause."""
    __tracebackhide__ = True
    raise InvalidArgumentError(safe_format(message, *args) if args else message) from cause


__all__ = [
    "EMPTY_UUID",
    "not_null",
    "not_null_allow_structs",
    "not_null_handle",
    "not_null_or_empty",
    "not_null_or_whitespace",
    "not_null_or_empty_sequence",
    "not_null_empty_or_null_elements",
    "null_or_not_null_elements",
    "not_empty",
    "in_range",
    "fail_range",
    "argument",
    "fail",
    "fail_with_cause",
]
