"""REQUIRED / NIL_OR_NOT_EMPTY — reject blank values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..errors import ERR_NIL_OR_NOT_EMPTY, ERR_REQUIRED, ValidationError
from ..values import indirect, is_empty


@dataclass(frozen=True)
class RequiredRule:
    """
    Checks that a value is not empty.

    A value is empty when it is nil, ``False``, zero, or has length zero
    (see :func:`~rulebound.values.is_empty`). With ``skip_nil`` set, a nil
    value is accepted and only non-nil empty values are rejected.
    """

    condition: bool = True
    skip_nil: bool = False
    err: ValidationError | None = None

    def validate(self, value: Any) -> Exception | None:
        if not self.condition:
            return None
        value, is_nil = indirect(value)
        if self.skip_nil:
            failed = not is_nil and is_empty(value)
        else:
            failed = is_nil or is_empty(value)
        if failed:
            return self._error()
        return None

    def _error(self) -> ValidationError:
        if self.err is not None:
            return self.err
        return ERR_NIL_OR_NOT_EMPTY if self.skip_nil else ERR_REQUIRED

    def when(self, condition: bool) -> RequiredRule:
        """Only enforce the rule when *condition* holds."""
        return replace(self, condition=condition)

    def error(self, message: str) -> RequiredRule:
        return replace(self, err=self._error().set_message(message))

    def error_object(self, err: ValidationError) -> RequiredRule:
        return replace(self, err=err)


REQUIRED = RequiredRule()
NIL_OR_NOT_EMPTY = RequiredRule(skip_nil=True)
