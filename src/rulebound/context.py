"""Request-scoped validation context."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _empty_values() -> MappingProxyType[Any, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ValidationContext:
    """
    Immutable bag of request-scoped values handed to context-aware rules.

    Derived contexts share the parent's cancellation flag. Cancellation is
    advisory: the engine never checks it, custom rules may.

    Usage::

        ctx = background().with_value("tenant", "acme")
        validate_with_context(ctx, payload, with_context(check_tenant))
    """

    values: MappingProxyType[Any, Any] = field(default_factory=_empty_values)
    cancel_event: threading.Event = field(
        default_factory=threading.Event, compare=False, repr=False
    )

    def with_value(self, key: Any, value: Any) -> ValidationContext:
        """Return a child context that also carries ``key -> value``."""
        values = dict(self.values)
        values[key] = value
        return ValidationContext(MappingProxyType(values), self.cancel_event)

    def value(self, key: Any, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()


def background() -> ValidationContext:
    """An empty, never-cancelled root context."""
    return ValidationContext()
