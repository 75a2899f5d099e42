"""Rule and validatable-value protocols."""

from __future__ import annotations

from .rule import (
    ContextRule,
    Rule,
    Validatable,
    ValidatableWithContext,
    ZeroCheckable,
)

__all__ = [
    "ContextRule",
    "Rule",
    "Validatable",
    "ValidatableWithContext",
    "ZeroCheckable",
]
