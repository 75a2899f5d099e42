"""
Rules that wrap other rules or plain callables.

- ``when(condition, *rules).else_(*rules)`` picks a branch up front.
- ``with_context(func)`` builds a rule from ``func(ctx, value)``.
- ``by(func)`` builds a rule from ``func(value)``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from .context import ValidationContext, background
from .engine.core import validate_value

RuleFunc = Callable[[Any], "Exception | None"]
ContextRuleFunc = Callable[[ValidationContext, Any], "Exception | None"]


@dataclass(frozen=True)
class WhenRule:
    """
    Runs ``rules`` when ``condition`` is true, ``else_rules`` otherwise.

    The chosen branch is evaluated with ``validate`` semantics, so ``SKIP``
    and self-validating values behave as they do at the top level.
    """

    condition: bool
    rules: tuple[Any, ...] = ()
    else_rules: tuple[Any, ...] = ()

    def else_(self, *rules: Any) -> WhenRule:
        return replace(self, else_rules=rules)

    def _branch(self) -> tuple[Any, ...]:
        return self.rules if self.condition else self.else_rules

    def validate(self, value: Any) -> Exception | None:
        return validate_value(None, value, self._branch())

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        return validate_value(ctx, value, self._branch())


def when(condition: bool, *rules: Any) -> WhenRule:
    return WhenRule(condition, rules)


@dataclass(frozen=True)
class ContextFuncRule:
    """A rule backed by ``func(ctx, value)``.

    Called without a context, ``func`` receives an empty background one.
    """

    func: ContextRuleFunc

    def validate(self, value: Any) -> Exception | None:
        return self.func(background(), value)

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        return self.func(ctx, value)


def with_context(func: ContextRuleFunc) -> ContextFuncRule:
    """
    Wrap a context-aware validation function as a rule.

    Example::

        def belongs_to_tenant(ctx, value):
            if value.tenant != ctx.value("tenant"):
                return new_error("tenant_mismatch", "belongs to another tenant")
            return None

        validate_with_context(ctx, order, with_context(belongs_to_tenant))
    """
    return ContextFuncRule(func)


@dataclass(frozen=True)
class InlineRule:
    func: RuleFunc

    def validate(self, value: Any) -> Exception | None:
        return self.func(value)


def by(func: RuleFunc) -> InlineRule:
    """Wrap ``func(value) -> Exception | None`` as a rule."""
    return InlineRule(func)
