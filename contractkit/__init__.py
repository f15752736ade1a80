"""
contractkit - Runtime argument and invariant checks.

A small foundational library of stateless guard functions. Checks return the
value they were given, or raise a structured error naming the offending
parameter.

Quick Start:
    >>> from contractkit import requires
    >>> def connect(host, ports):
    ...     host = requires.not_null_or_whitespace(host, "host")
    ...     ports = requires.not_null_empty_or_null_elements(ports, "ports")

Public API:
    Checks:
        - requires: Caller-misuse checks (raise ArgumentError subclasses)
        - assumes: Internal-invariant checks (raise a private internal error)

    Errors:
        - ContractError, ArgumentError and its subclasses
        - ErrorKind: Classification of every violation
        - is_internal_error: Recognise internal-invariant failures

    Formatting:
        - safe_format, safe_str: Rendering that never raises

    Messages:
        - MessageCatalog, get_message_catalog, load_message_catalog

    Logging:
        - get_logger

Two-tier error model:
    Catch ArgumentError at the boundary where input becomes a user-visible
    error. Let internal errors propagate to the crash/telemetry handler:

    >>> try:
    ...     service.handle(request)
    ... except ArgumentError as e:
    ...     return bad_request(str(e))
"""

__version__ = "0.1.0"

from contractkit import assumes, requires
from contractkit.exceptions import (
    ArgumentError,
    ArgumentOutOfRangeError,
    ContractError,
    EmptyArgumentError,
    ErrorKind,
    InvalidArgumentError,
    NullArgumentError,
    NullElementArgumentError,
    WhitespaceArgumentError,
    is_internal_error,
)
from contractkit.formatting import safe_format, safe_str
from contractkit.logging import get_logger
from contractkit.messages import (
    MessageCatalog,
    MessageCatalogError,
    get_message_catalog,
    load_message_catalog,
)

__all__ = [
    "__version__",
    # Checks
    "requires",
    "assumes",
    # Errors
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
    # Formatting
    "safe_format",
    "safe_str",
    # Messages
    "MessageCatalog",
    "MessageCatalogError",
    "get_message_catalog",
    "load_message_catalog",
    # Logging
    "get_logger",
]
