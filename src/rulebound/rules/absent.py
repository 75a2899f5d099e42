"""NIL / EMPTY / NOT_NIL — presence checks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..errors import ERR_EMPTY, ERR_NIL, ERR_NOT_NIL_REQUIRED, ValidationError
from ..values import indirect, is_empty


@dataclass(frozen=True)
class AbsentRule:
    """
    Checks that a value is absent.

    Without ``skip_nil`` (``NIL``) only a nil value passes. With
    ``skip_nil`` (``EMPTY``) nil and empty values pass.
    """

    condition: bool = True
    skip_nil: bool = False
    err: ValidationError | None = None

    def validate(self, value: Any) -> Exception | None:
        if not self.condition:
            return None
        value, is_nil = indirect(value)
        if is_nil:
            return None
        if self.skip_nil and is_empty(value):
            return None
        return self._error()

    def _error(self) -> ValidationError:
        if self.err is not None:
            return self.err
        return ERR_EMPTY if self.skip_nil else ERR_NIL

    def when(self, condition: bool) -> AbsentRule:
        return replace(self, condition=condition)

    def error(self, message: str) -> AbsentRule:
        return replace(self, err=self._error().set_message(message))

    def error_object(self, err: ValidationError) -> AbsentRule:
        return replace(self, err=err)


@dataclass(frozen=True)
class NotNilRule:
    """Checks that a value is not nil. Empty but non-nil values pass."""

    err: ValidationError = ERR_NOT_NIL_REQUIRED

    def validate(self, value: Any) -> Exception | None:
        _, is_nil = indirect(value)
        if is_nil:
            return self.err
        return None

    def error(self, message: str) -> NotNilRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> NotNilRule:
        return replace(self, err=err)


NIL = AbsentRule()
EMPTY = AbsentRule(skip_nil=True)
NOT_NIL = NotNilRule()
