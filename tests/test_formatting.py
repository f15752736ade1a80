# tests/test_formatting.py
"""
Tests for safe_format / safe_str.

Verifies:
1. Normal positional interpolation
2. Every malformed input still produces readable text
3. The fallback format is exactly "<template> [args: ...]"
4. An unprintable template yields the fixed last-resort text
"""

from __future__ import annotations

import pytest

from contractkit.formatting import (
    MISSING_TEMPLATE,
    UNFORMATTABLE_MESSAGE,
    safe_format,
    safe_str,
)


class Unprintable:
    def __str__(self):
        raise RuntimeError("boom")

    def __format__(self, spec):
        raise RuntimeError("boom")


class TestSafeStr:
    def test_plain_values(self):
        assert safe_str("abc") == "abc"
        assert safe_str(42) == "42"
        assert safe_str(None) == "None"

    def test_raising_str(self):
        assert safe_str(Unprintable()) == "<unprintable Unprintable object>"


class TestSafeFormat:
    def test_positional_interpolation(self):
        assert safe_format("'{0}' must not be {1}.", "name", "empty") == "'name' must not be empty."

    def test_auto_numbered_fields(self):
        assert safe_format("{} and {}", 1, 2) == "1 and 2"

    def test_extra_args_are_ignored(self):
        assert safe_format("only {0}", "a", "b") == "only a"

    def test_zero_args_returns_template_verbatim(self):
        assert safe_format("literal {0} and {") == "literal {0} and {"

    def test_empty_template(self):
        assert safe_format("") == ""
        assert safe_format("", 1) == ""

    def test_none_template(self):
        assert safe_format(None) == MISSING_TEMPLATE

    def test_none_template_with_args(self):
        assert safe_format(None, "x", 1) == f"{MISSING_TEMPLATE} [args: x, 1]"

    def test_none_argument(self):
        assert safe_format("value: {0}", None) == "value: None"

    @pytest.mark.parametrize(
        "template",
        ["unbalanced {0", "unbalanced 0}", "{0} {1} {2}", "{name}", "{0:%%bad}"],
    )
    def test_malformed_template_falls_back(self, template):
        result = safe_format(template, "a", 7)
        assert result == f"{template} [args: a, 7]"

    def test_raising_argument_falls_back(self):
        result = safe_format("value {0}", Unprintable())
        assert result == "value {0} [args: <unprintable Unprintable object>]"

    def test_non_string_template(self):
        assert safe_format(123, "x") == "123"

    @pytest.mark.parametrize("args", [(), ("x",), (Unprintable(), 2)])
    def test_unprintable_template_uses_last_resort_text(self, args):
        assert safe_format(Unprintable(), *args) == "<message could not be formatted>"
        assert safe_format(Unprintable(), *args) == UNFORMATTABLE_MESSAGE

    def test_template_str_returning_non_string(self):
        class BadStr:
            def __str__(self):
                return 42

        assert safe_format(BadStr(), "x") == UNFORMATTABLE_MESSAGE
