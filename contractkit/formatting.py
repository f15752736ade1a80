# contractkit/formatting.py
"""
Crash-proof message formatting.

Every error raised by contractkit renders its message through safe_format().
It sits underneath all error paths, so it must return readable text for any
input: a failure here would replace the original contract violation with an
unrelated formatting error.

Rendering rules:
    - None template           -> MISSING_TEMPLATE, plus any args in the fallback form
    - unprintable template    -> UNFORMATTABLE_MESSAGE
    - no arguments            -> template text returned verbatim
    - arguments               -> template.format(*args)
    - format() failed         -> "<template> [args: a1, a2, ...]", each arg via safe_str

Examples:
    >>> safe_format("'{0}' must not be empty.", "name")
    "'name' must not be empty."
    >>> safe_format("unbalanced {0", 1)
    'unbalanced {0 [args: 1]'
    >>> safe_format(None)
    '(no message)'
"""

from __future__ import annotations

from typing import Any

from contractkit.logging.logger import get_logger
from contractkit.logging.tags import FORMAT

logger = get_logger(__name__)

MISSING_TEMPLATE = "(no message)"
UNFORMATTABLE_MESSAGE = "<message could not be formatted>"


def safe_str(value: Any) -> str:
    """
    Stringify a value without ever raising.

    Objects whose __str__ raises are rendered as "<unprintable T object>".
    """
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def safe_format(template: Any, *args: Any) -> str:
    """
    Render a positional message template.

    Args:
        template: str.format-style template ("{0}", "{1}", ...). May be None
                  or a non-string object.
        *args: Positional arguments for the template.

    Returns:
        The formatted text, or a best-effort fallback. Never raises.
    """
    if template is None:
        text = MISSING_TEMPLATE
    else:
        try:
            text = str(template)
        except Exception as e:
            logger.debug(f"{FORMAT} Template could not be stringified: {type(e).__name__}")
            return UNFORMATTABLE_MESSAGE

    if not args:
        return text

    if template is not None:
        try:
            return text.format(*args)
        except Exception as e:
            # Covers unmatched braces, missing indexes, named fields and
            # arguments whose __format__ raises.
            logger.debug(f"{FORMAT} Falling back for template {text!r}: {type(e).__name__}")

    rendered = ", ".join(safe_str(arg) for arg in args)
    return f"{text} [args: {rendered}]"


__all__ = ["MISSING_TEMPLATE", "UNFORMATTABLE_MESSAGE", "safe_format", "safe_str"]
