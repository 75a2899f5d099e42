"""Rule contract — protocols every rule and validatable value can satisfy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..context import ValidationContext


@runtime_checkable
class Rule(Protocol):
    """A validation rule.

    Rules are immutable values. ``validate`` returns ``None`` when *value*
    is valid, or the error describing why it is not. Rules never raise for
    invalid input.
    """

    def validate(self, value: Any) -> Exception | None:
        ...


@runtime_checkable
class ContextRule(Protocol):
    """A rule that needs the request-scoped :class:`ValidationContext`.

    Rules that only implement :class:`Rule` are adapted by the engine,
    which calls ``validate(value)`` and ignores the context.
    """

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        ...


@runtime_checkable
class Validatable(Protocol):
    """A value that knows how to validate itself."""

    def validate(self) -> Exception | None:
        ...


@runtime_checkable
class ValidatableWithContext(Protocol):
    """A self-validating value that uses the request-scoped context."""

    def validate_with_context(self, ctx: ValidationContext) -> Exception | None:
        ...


@runtime_checkable
class ZeroCheckable(Protocol):
    """A value with its own notion of emptiness (e.g. time-like values)."""

    def is_zero(self) -> bool:
        ...
