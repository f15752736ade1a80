# tests/test_exceptions.py
"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

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
)


@pytest.mark.parametrize(
    "cls, kind",
    [
        (NullArgumentError, ErrorKind.NULL_ARGUMENT),
        (EmptyArgumentError, ErrorKind.EMPTY_ARGUMENT),
        (WhitespaceArgumentError, ErrorKind.WHITESPACE_ARGUMENT),
        (NullElementArgumentError, ErrorKind.NULL_ELEMENT_ARGUMENT),
        (ArgumentOutOfRangeError, ErrorKind.OUT_OF_RANGE_ARGUMENT),
        (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT),
    ],
)
def test_kinds_and_hierarchy(cls, kind):
    error = cls("msg", "param")
    assert error.kind is kind
    assert isinstance(error, ArgumentError)
    assert isinstance(error, ContractError)
    assert isinstance(error, ValueError)


def test_message_with_param_name():
    error = NullArgumentError("Value cannot be None.", param_name="path")
    assert str(error) == "Value cannot be None. (parameter: path)"
    assert error.message == "Value cannot be None."
    assert error.param_name == "path"


def test_param_name_only():
    assert str(InvalidArgumentError(None, "path")) == "(parameter: path)"


def test_no_message_no_param():
    error = InvalidArgumentError()
    assert str(error) == ""
    assert error.message is None


def test_unprintable_message_does_not_raise():
    class Unprintable:
        def __str__(self):
            raise RuntimeError("boom")

    error = InvalidArgumentError(Unprintable(), "x")
    assert str(error) == "<unprintable Unprintable object> (parameter: x)"


def test_error_kind_is_string_valued():
    assert ErrorKind.NULL_ARGUMENT == "null_argument"
    assert ErrorKind("internal_invariant") is ErrorKind.INTERNAL_INVARIANT
