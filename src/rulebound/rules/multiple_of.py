"""multiple_of() — divisibility check."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from ..errors import ERR_MULTIPLE_OF_INVALID, ValidationError, new_internal_error
from ..values import indirect


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real | Decimal) and not isinstance(value, bool)


def _exact(number: Any) -> Any:
    """Floats as the decimal they print as, so ``0.3 % 0.1`` is exact."""
    if isinstance(number, float):
        return Decimal(repr(number))
    return number


@dataclass(frozen=True)
class MultipleOfRule:
    base: Any
    err: ValidationError = ERR_MULTIPLE_OF_INVALID

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil:
            return None
        if _is_integer(self.base):
            if not _is_integer(value):
                return TypeError(f"cannot convert {type(value).__name__} to int")
        elif _is_real(self.base):
            if not _is_real(value):
                return TypeError(f"cannot convert {type(value).__name__} to float")
        else:
            return TypeError(f"type not supported: {type(self.base).__name__}")
        if self.base == 0:
            return new_internal_error(ValueError("base cannot be zero"))
        try:
            remainder = _exact(value) % _exact(self.base)
        except TypeError as exc:
            return exc
        except InvalidOperation:
            # inf and nan
            return self.err.set_params({"base": self.base})
        if remainder == 0:
            return None
        return self.err.set_params({"base": self.base})

    def error(self, message: str) -> MultipleOfRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> MultipleOfRule:
        return replace(self, err=err)


def multiple_of(base: Any) -> MultipleOfRule:
    """
    Check that a number is a multiple of *base*.

    An integer base only accepts integer values; a float or ``Decimal``
    base accepts any real number. Floats are compared by their decimal
    representation. A zero base is an internal error.
    """
    return MultipleOfRule(base)
