"""date() — validate date/time strings against a ``strptime`` layout."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ..errors import (
    ERR_DATE_INVALID,
    ERR_DATE_OUT_OF_RANGE,
    ValidationError,
    new_internal_error,
)
from ..values import ensure_string, indirect, is_empty


@dataclass(frozen=True)
class DateRule:
    layout: str
    minimum: datetime | None = None
    maximum: datetime | None = None
    err: ValidationError = ERR_DATE_INVALID
    range_err: ValidationError = ERR_DATE_OUT_OF_RANGE

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        try:
            text = ensure_string(value)
        except ValidationError as exc:
            return exc
        try:
            parsed = datetime.strptime(text, self.layout)
        except ValueError:
            return self.err
        try:
            too_early = self.minimum is not None and parsed < self.minimum
            too_late = self.maximum is not None and parsed > self.maximum
        except TypeError as exc:
            # naive/aware mismatch between the layout and the bounds
            return new_internal_error(exc)
        if too_early or too_late:
            return self.range_err
        return None

    def min(self, minimum: datetime | None) -> DateRule:
        """Earliest accepted date; ``None`` removes the bound."""
        return replace(self, minimum=minimum)

    def max(self, maximum: datetime | None) -> DateRule:
        """Latest accepted date; ``None`` removes the bound."""
        return replace(self, maximum=maximum)

    def error(self, message: str) -> DateRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> DateRule:
        return replace(self, err=err)

    def range_error(self, message: str) -> DateRule:
        return replace(self, range_err=self.range_err.set_message(message))

    def range_error_object(self, err: ValidationError) -> DateRule:
        return replace(self, range_err=err)


def date(layout: str) -> DateRule:
    """
    Check that a string value parses with ``datetime.strptime(value, layout)``.

    Examples::

        date("%Y-%m-%d")
        date("%Y-%m-%dT%H:%M:%S%z").min(datetime(2000, 1, 1, tzinfo=timezone.utc))

    An empty value is valid; compose with ``REQUIRED`` to reject it.
    """
    return DateRule(layout)
