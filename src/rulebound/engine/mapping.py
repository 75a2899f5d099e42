"""map_() / key() — validate selected keys of a mapping."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from ..errors import (
    ERR_KEY_MISSING,
    ERR_KEY_UNEXPECTED,
    ERR_KEY_WRONG_TYPE,
    Errors,
    MapRequiredError,
    is_internal,
    new_internal_error,
)
from ..values import indirect
from .core import error_key, validate_value

if TYPE_CHECKING:
    from ..context import ValidationContext

logger = logging.getLogger("rulebound.engine")


@dataclass(frozen=True)
class KeyRules:
    """Rules bound to one mapping key."""

    key: Any
    rules: tuple[Any, ...] = ()
    is_optional: bool = False

    def optional(self) -> KeyRules:
        """Accept a mapping in which the key is absent."""
        return replace(self, is_optional=True)


def key(k: Any, *rules: Any) -> KeyRules:
    return KeyRules(k, rules)


def _key_fits(k: Any, mapping: Mapping[Any, Any]) -> bool:
    if not isinstance(k, Hashable):
        return False
    key_types = {type(existing) for existing in mapping}
    if not key_types:
        return True
    return isinstance(k, tuple(key_types))


@dataclass(frozen=True)
class MapRule:
    """
    Validates a mapping key by key.

    Every declared key must be present unless marked ``optional()``; keys
    present in the mapping but not declared are reported as unexpected
    unless ``allow_extra_keys()`` is set. Missing and unexpected keys are
    reported together in one :class:`~rulebound.errors.Errors`::

        map_(
            key("name", REQUIRED),
            key("value", REQUIRED, length(5, 10)),
            key("note").optional(),
        )
    """

    keys: tuple[KeyRules, ...] = ()
    extra_keys_allowed: bool = False

    def allow_extra_keys(self) -> MapRule:
        return replace(self, extra_keys_allowed=True)

    def validate(self, value: Any) -> Exception | None:
        return self._validate(None, value)

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        return self._validate(ctx, value)

    def _validate(
        self, ctx: ValidationContext | None, value: Any
    ) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil:
            return None
        if not isinstance(value, Mapping):
            return new_internal_error(MapRequiredError())

        errs = Errors()
        for bound in self.keys:
            name = error_key(bound.key)
            if not _key_fits(bound.key, value):
                errs[name] = ERR_KEY_WRONG_TYPE
                continue
            if bound.key not in value:
                if not bound.is_optional:
                    errs[name] = ERR_KEY_MISSING
                continue
            err = validate_value(ctx, value[bound.key], bound.rules)
            if is_internal(err):
                logger.debug("Key %r failed internally, aborting", bound.key)
                return err
            if err is not None:
                errs[name] = err

        if not self.extra_keys_allowed:
            declared = [bound.key for bound in self.keys]
            for present in value:
                if not any(present == k for k in declared):
                    errs[error_key(present)] = ERR_KEY_UNEXPECTED
        return errs.filter()


def map_(*keys: KeyRules) -> MapRule:
    return MapRule(keys)
