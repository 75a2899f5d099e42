"""Composite traversal: values, structs, mappings and collections."""

from __future__ import annotations

from .core import (
    apply_rule,
    error_key,
    self_validate,
    validate,
    validate_value,
    validate_with_context,
)
from .each import EachRule, each
from .fields import EMBEDDED, StructField, clear_registry, struct_fields
from .mapping import KeyRules, MapRule, key, map_
from .struct import (
    FieldRules,
    field,
    validate_struct,
    validate_struct_with_context,
)

__all__ = [
    "EMBEDDED",
    "EachRule",
    "FieldRules",
    "KeyRules",
    "MapRule",
    "StructField",
    "apply_rule",
    "clear_registry",
    "each",
    "error_key",
    "field",
    "key",
    "map_",
    "self_validate",
    "struct_fields",
    "validate",
    "validate_struct",
    "validate_struct_with_context",
    "validate_value",
    "validate_with_context",
]
