"""min_() / max_() — ordered-value bounds."""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Any, Literal

from ..errors import (
    ERR_MAX_LESS_EQUAL_THAN_REQUIRED,
    ERR_MAX_LESS_THAN_REQUIRED,
    ERR_MIN_GREATER_EQUAL_THAN_REQUIRED,
    ERR_MIN_GREATER_THAN_REQUIRED,
    ValidationError,
)
from ..values import indirect, is_empty

_PASSES = {
    ("min", False): operator.ge,
    ("min", True): operator.gt,
    ("max", False): operator.le,
    ("max", True): operator.lt,
}


@dataclass(frozen=True)
class ThresholdRule:
    threshold: Any
    bound: Literal["min", "max"]
    exclusive_bound: bool = False
    err: ValidationError = ERR_MIN_GREATER_EQUAL_THAN_REQUIRED

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil or is_empty(value):
            return None
        passes = _PASSES[(self.bound, self.exclusive_bound)]
        try:
            ok = passes(value, self.threshold)
        except TypeError:
            return TypeError(
                f"cannot compare {type(value).__name__} "
                f"with {type(self.threshold).__name__}"
            )
        if ok:
            return None
        return self.err.set_params({"threshold": self.threshold})

    def exclusive(self) -> ThresholdRule:
        """Reject values equal to the threshold."""
        if self.bound == "min":
            err = ERR_MIN_GREATER_THAN_REQUIRED
        else:
            err = ERR_MAX_LESS_THAN_REQUIRED
        return replace(self, exclusive_bound=True, err=err)

    def error(self, message: str) -> ThresholdRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> ThresholdRule:
        return replace(self, err=err)


def min_(threshold: Any) -> ThresholdRule:
    """Value must be ``>= threshold`` (``>`` after ``.exclusive()``)."""
    return ThresholdRule(threshold, "min")


def max_(threshold: Any) -> ThresholdRule:
    """Value must be ``<= threshold`` (``<`` after ``.exclusive()``)."""
    return ThresholdRule(threshold, "max", err=ERR_MAX_LESS_EQUAL_THAN_REQUIRED)
