"""SKIP — stop evaluating the remaining rules of a list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class SkipRule:
    """
    Always valid.

    When active, the engine stops at this rule: the rules after it are not
    run, and a leading ``SKIP`` also bypasses the value's own ``validate()``.
    """

    skip: bool = True

    def validate(self, value: Any) -> Exception | None:
        return None

    def when(self, condition: bool) -> SkipRule:
        """Only skip when *condition* holds."""
        return replace(self, skip=condition)


SKIP = SkipRule()


def is_active_skip(rule: Any) -> bool:
    return isinstance(rule, SkipRule) and rule.skip
