# contractkit/exceptions.py
"""
Error taxonomy for contract violations.

Hierarchy:
    ContractError - Base for every violation raised by contractkit
    └── ArgumentError - Caller misuse (also a ValueError)
        ├── NullArgumentError - Required value was None
        ├── EmptyArgumentError - Value present but structurally empty
        ├── WhitespaceArgumentError - Text consists only of whitespace
        ├── NullElementArgumentError - Sequence holds a None element
        ├── ArgumentOutOfRangeError - Range/bounds predicate failed
        └── InvalidArgumentError - Any other failed precondition

Internal invariant failures use a private subclass of ContractError that
lives in contractkit.assumes and is deliberately not exported. Use
is_internal_error() to recognise it in crash/telemetry handlers.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from contractkit.formatting import safe_str


class ErrorKind(str, Enum):
    """Classification attached to every ContractError."""

    NULL_ARGUMENT = "null_argument"
    EMPTY_ARGUMENT = "empty_argument"
    WHITESPACE_ARGUMENT = "whitespace_argument"
    NULL_ELEMENT_ARGUMENT = "null_element_argument"
    OUT_OF_RANGE_ARGUMENT = "out_of_range_argument"
    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL_INVARIANT = "internal_invariant"


# =============================================================================
# Base
# =============================================================================


class ContractError(Exception):
    """
    Base exception for all contract violations.

    Attributes:
        kind: The ErrorKind of this violation
        message: The message as supplied, without the parameter suffix.
                 May be None when the caller supplied no message.
        param_name: Name of the offending parameter, if known

    The rendered text (str(error)) appends the parameter name when present:

        >>> str(NullArgumentError("Value cannot be None.", param_name="path"))
        'Value cannot be None. (parameter: path)'
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: Optional[str] = None, param_name: Optional[str] = None):
        self.message = message
        self.param_name = param_name

        text = "" if message is None else safe_str(message)
        if param_name:
            text = f"{text} (parameter: {param_name})" if text else f"(parameter: {param_name})"
        super().__init__(text)


# =============================================================================
# Caller Misuse
# =============================================================================


class ArgumentError(ContractError, ValueError):
    """
    An argument supplied by the caller violated the function's contract.

    These are expected to propagate to whatever boundary turns them into a
    user-visible error (an API response, a CLI diagnostic):

        >>> try:
        ...     client.open(path=None)
        ... except ArgumentError as e:
        ...     print(f"Bad input: {e}")
    """

    kind = ErrorKind.INVALID_ARGUMENT


class NullArgumentError(ArgumentError):
    """A required argument was None (or a null handle)."""

    kind = ErrorKind.NULL_ARGUMENT


class EmptyArgumentError(ArgumentError):
    """
    An argument was present but empty.

    Raised for zero-length text, text starting with a NUL character,
    sequences that yield no elements and the all-zero UUID.
    """

    kind = ErrorKind.EMPTY_ARGUMENT


class WhitespaceArgumentError(ArgumentError):
    """A text argument was non-empty but consisted only of whitespace."""

    kind = ErrorKind.WHITESPACE_ARGUMENT


class NullElementArgumentError(ArgumentError):
    """A sequence argument contained a None element."""

    kind = ErrorKind.NULL_ELEMENT_ARGUMENT


class ArgumentOutOfRangeError(ArgumentError):
    """An argument failed a range or bounds check."""

    kind = ErrorKind.OUT_OF_RANGE_ARGUMENT


class InvalidArgumentError(ArgumentError):
    """A caller precondition not covered by the more specific kinds was false."""

    kind = ErrorKind.INVALID_ARGUMENT


def is_internal_error(error: BaseException) -> bool:
    """
    Tell whether an exception signals a defect inside a library.

    Meant for top-level crash/telemetry handlers that need to route
    "this library has a bug" separately from "the input was invalid".
    """
    return isinstance(error, ContractError) and error.kind is ErrorKind.INTERNAL_INVARIANT


__all__ = [
    "ErrorKind",
    "ContractError",
    "ArgumentError",
    "NullArgumentError",
    "EmptyArgumentError",
    "WhitespaceArgumentError",
    "NullElementArgumentError",
    "ArgumentOutOfRangeError",
    "InvalidArgumentError",
    "is_internal_error",
]
