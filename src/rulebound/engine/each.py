"""each() — apply rules to every element of a list, tuple or mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import ERR_NOT_ITERABLE, Errors, is_internal
from ..values import Kind, indirect, kind_of
from .core import error_key, validate_value

if TYPE_CHECKING:
    from ..context import ValidationContext

logger = logging.getLogger("rulebound.engine")


@dataclass(frozen=True)
class EachRule:
    """
    Validates each element with ``validate`` semantics.

    Failures are keyed by list index or by (stringified) mapping key. Any
    value that is not a list, tuple or mapping, ``None`` included, fails
    with ``ERR_NOT_ITERABLE``.
    """

    rules: tuple[Any, ...] = ()

    def validate(self, value: Any) -> Exception | None:
        return self._validate(None, value)

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        return self._validate(ctx, value)

    def _validate(
        self, ctx: ValidationContext | None, value: Any
    ) -> Exception | None:
        value, _ = indirect(value)
        if kind_of(value) is not Kind.COLLECTION or isinstance(value, Set):
            return ERR_NOT_ITERABLE
        items: list[tuple[Any, Any]]
        if isinstance(value, Mapping):
            items = list(value.items())
        else:
            items = list(enumerate(value))

        errs = Errors()
        for k, element in items:
            err = validate_value(ctx, element, self.rules)
            if is_internal(err):
                logger.debug("Element %r failed internally, aborting", k)
                return err
            if err is not None:
                errs[error_key(k)] = err
        return errs.filter()


def each(*rules: Any) -> EachRule:
    return EachRule(rules)
