"""in_() / not_in() — membership in a fixed list of values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..errors import ERR_IN_INVALID, ERR_NOT_IN_INVALID, ValidationError
from ..values import indirect, is_empty


@dataclass(frozen=True)
class InRule:
    elements: tuple[Any, ...]
    err: ValidationError = ERR_IN_INVALID

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        if any(element == value for element in self.elements):
            return None
        return self.err

    def error(self, message: str) -> InRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> InRule:
        return replace(self, err=err)


@dataclass(frozen=True)
class NotInRule:
    elements: tuple[Any, ...]
    err: ValidationError = ERR_NOT_IN_INVALID

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        if any(element == value for element in self.elements):
            return self.err
        return None

    def error(self, message: str) -> NotInRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> NotInRule:
        return replace(self, err=err)


def in_(*values: Any) -> InRule:
    """Valid when the value equals one of *values*. Empty values pass."""
    return InRule(values)


def not_in(*values: Any) -> NotInRule:
    """Valid when the value equals none of *values*. Empty values pass."""
    return NotInRule(values)
