"""
Sequential rule evaluation.

``validate`` is the building block of every composite: struct fields, map
keys and collection elements are all checked with :func:`validate_value`.
Evaluation order for one value:

1. an active ``SKIP`` in first position makes the value valid outright;
2. a self-validating value (``validate()`` / ``validate_with_context(ctx)``
   instance method) is asked to validate itself, and a failure is returned
   as-is;
3. the rules run in declaration order until one fails or an active
   ``SKIP`` is reached.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ..context import background
from ..errors import Errors, is_internal
from ..ports.rule import ContextRule, Rule
from ..rules.skip import is_active_skip
from ..values import Kind, indirect, kind_of

if TYPE_CHECKING:
    from ..context import ValidationContext

logger = logging.getLogger("rulebound.engine")


def validate(value: Any, *rules: Any) -> Exception | None:
    """
    Validate *value* against *rules*.

    Returns ``None`` when the value is valid, otherwise the first error
    produced. Rules that need a context receive an empty background one.
    """
    return validate_value(None, value, rules)


def validate_with_context(
    ctx: ValidationContext, value: Any, *rules: Any
) -> Exception | None:
    """Like :func:`validate`, threading *ctx* into context-aware rules."""
    return validate_value(ctx, value, rules)


def validate_value(
    ctx: ValidationContext | None, value: Any, rules: Sequence[Any]
) -> Exception | None:
    if rules and is_active_skip(rules[0]):
        return None

    resolved, is_nil = indirect(value)
    if not is_nil:
        err = self_validate(ctx, resolved)
        if err is not None:
            return err

    for rule in rules:
        if is_active_skip(rule):
            return None
        err = apply_rule(ctx, rule, value)
        if err is not None:
            return err
    return None


def apply_rule(
    ctx: ValidationContext | None, rule: Any, value: Any
) -> Exception | None:
    """Run one rule, choosing its context-aware form when a context is given."""
    if ctx is not None and isinstance(rule, ContextRule):
        return rule.validate_with_context(ctx, value)
    if isinstance(rule, Rule):
        return rule.validate(value)
    if isinstance(rule, ContextRule):
        return rule.validate_with_context(background(), value)
    raise TypeError(f"{type(rule).__name__} object is not a validation rule")


def error_key(k: Any) -> str:
    """Aggregate key for a mapping key or list index."""
    return "" if k is None else str(k)


# ── Self-validation ──────────────────────────────────────────────────


def _instance_method(
    value: Any, name: str, arity: int
) -> Callable[..., Any] | None:
    """
    Bound instance method *name* callable with *arity* positional arguments.

    Class- and static methods are ignored, and so are methods with another
    signature, such as a rule's ``validate(value)``.
    """
    try:
        attr = inspect.getattr_static(value, name)
    except AttributeError:
        return None
    if isinstance(attr, classmethod | staticmethod) or not callable(attr):
        return None
    method: Callable[..., Any] = getattr(value, name)
    try:
        inspect.signature(method).bind(*([None] * arity))
    except (TypeError, ValueError):
        return None
    return method


def _self_validator(
    ctx: ValidationContext | None, value: Any
) -> Callable[[], Exception | None] | None:
    with_ctx = _instance_method(value, "validate_with_context", 1)
    plain = _instance_method(value, "validate", 0)
    if with_ctx is not None and (ctx is not None or plain is None):
        run_ctx = ctx if ctx is not None else background()
        return lambda: with_ctx(run_ctx)
    return plain


def is_self_validating(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return _self_validator(None, value) is not None


def self_validate(ctx: ValidationContext | None, value: Any) -> Exception | None:
    """
    Let *value* validate itself.

    A list, tuple or mapping whose non-nil elements all validate themselves
    is checked element by element; failures are keyed by index or key.
    """
    if isinstance(value, type):
        return None
    validator = _self_validator(ctx, value)
    if validator is not None:
        return validator()
    if kind_of(value) is Kind.COLLECTION:
        return _validate_elements(ctx, value)
    return None


def _validate_elements(ctx: ValidationContext | None, value: Any) -> Exception | None:
    if isinstance(value, Mapping):
        items = [(error_key(k), v) for k, v in value.items()]
    elif isinstance(value, list | tuple):
        items = [(error_key(i), v) for i, v in enumerate(value)]
    else:
        return None

    present: list[tuple[str, Any]] = []
    for k, v in items:
        resolved, is_nil = indirect(v)
        if not is_nil:
            present.append((k, resolved))
    if not present or not all(is_self_validating(v) for _, v in present):
        return None

    errs = Errors()
    for k, v in present:
        err = self_validate(ctx, v)
        if is_internal(err):
            logger.debug("Element %s raised an internal error, aborting", k)
            return err
        errs[k] = err
    return errs.filter()
