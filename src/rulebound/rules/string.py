"""StringRule — adapt a ``str -> bool`` predicate into a rule."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from ..errors import ValidationError, new_error
from ..values import ensure_string, indirect, is_empty

StringPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class StringRule:
    """
    Checks a string (or UTF-8 bytes) value with a predicate.

    Empty values are valid. Non-text values fail with ``ERR_NOT_STRING``.
    """

    validate_string: StringPredicate
    err: ValidationError

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        try:
            text = ensure_string(value)
        except ValidationError as exc:
            return exc
        if self.validate_string(text):
            return None
        return self.err

    def error(self, message: str) -> StringRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> StringRule:
        return replace(self, err=err)


def new_string_rule(predicate: StringPredicate, message: str) -> StringRule:
    """Build a rule from *predicate*; failures carry *message* and no code."""
    return StringRule(predicate, new_error("", message))


def new_string_rule_with_error(
    predicate: StringPredicate, err: ValidationError
) -> StringRule:
    return StringRule(predicate, err)
