"""length() — bound the length of text and collections."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..errors import (
    ERR_LENGTH_EMPTY_REQUIRED,
    ERR_LENGTH_INVALID,
    ERR_LENGTH_OUT_OF_RANGE,
    ERR_LENGTH_TOO_LONG,
    ERR_LENGTH_TOO_SHORT,
    ValidationError,
)
from ..values import indirect, is_empty, length_of


def _length_error(min_len: int, max_len: int) -> ValidationError:
    if min_len == 0 and max_len == 0:
        err = ERR_LENGTH_EMPTY_REQUIRED
    elif min_len == max_len:
        err = ERR_LENGTH_INVALID
    elif min_len == 0:
        err = ERR_LENGTH_TOO_LONG
    elif max_len == 0:
        err = ERR_LENGTH_TOO_SHORT
    else:
        err = ERR_LENGTH_OUT_OF_RANGE
    return err.set_params({"min": min_len, "max": max_len})


@dataclass(frozen=True)
class LengthRule:
    min_len: int
    max_len: int
    err: ValidationError

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        try:
            size = length_of(value)
        except TypeError as exc:
            return exc
        if (
            (self.min_len > 0 and size < self.min_len)
            or (self.max_len > 0 and size > self.max_len)
            or (self.min_len == 0 and self.max_len == 0 and size > 0)
        ):
            return self.err
        return None

    def error(self, message: str) -> LengthRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> LengthRule:
        return replace(self, err=err)


def length(min_len: int, max_len: int) -> LengthRule:
    """
    Check that the length of a value is within ``[min_len, max_len]``.

    A bound of ``0`` leaves that side open; ``length(0, 0)`` requires the
    value to be empty. Strings are measured in characters. An empty value
    is valid; compose with ``REQUIRED`` to reject it.
    """
    return LengthRule(min_len, max_len, _length_error(min_len, max_len))
