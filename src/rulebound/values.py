"""
Value normalization: kind dispatch, indirection and emptiness.

Every rule goes through the same small set of helpers so that "nil" and
"empty" mean the same thing everywhere:

- :func:`kind_of` classifies a value into one of the :class:`Kind` members.
- :func:`indirect` resolves reference-like wrappers (weak references,
  pydantic secrets) to the value they hold, or reports that there is none.
- :func:`is_empty` applies the per-kind emptiness policy used by
  ``REQUIRED`` and by the "empty input is valid" default of leaf rules.
"""

from __future__ import annotations

import dataclasses
import numbers
import weakref
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from types import ModuleType
from typing import Any

from pydantic import BaseModel, SecretBytes, SecretStr

from .errors import ERR_NOT_STRING, ValidationError
from .ports.rule import ZeroCheckable


class Kind(str, Enum):
    """Semantic kinds the engine and rules dispatch on."""

    NIL = "nil"
    BOOL = "bool"
    NUMBER = "number"
    TEXT = "text"
    COLLECTION = "collection"
    STRUCT = "struct"
    OTHER = "other"


def is_struct(value: Any) -> bool:
    """True for dataclass instances, pydantic models and plain class instances."""
    if isinstance(value, (type, ModuleType, Enum)):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, BaseModel):
        return True
    if callable(value):
        return False
    return hasattr(value, "__dict__")


def kind_of(value: Any) -> Kind:
    if value is None:
        return Kind.NIL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, str | bytes | bytearray):
        return Kind.TEXT
    if isinstance(value, Mapping | Sequence | Set):
        return Kind.COLLECTION
    if is_struct(value):
        return Kind.STRUCT
    return Kind.OTHER


def indirect(value: Any) -> tuple[Any, bool]:
    """
    Resolve *value* to the concrete value it refers to.

    Returns ``(resolved, is_nil)``. ``is_nil`` is true for ``None`` and for
    a dead weak reference. Wrappers are chased transitively.
    """
    while True:
        if value is None:
            return None, True
        if isinstance(value, weakref.ReferenceType):
            value = value()
            continue
        if isinstance(value, SecretStr | SecretBytes):
            value = value.get_secret_value()
            continue
        return value, False


def is_empty(value: Any) -> bool:
    """
    Check whether *value* counts as blank.

    - nil: empty
    - bool: ``False`` is empty
    - numbers: zero is empty
    - str, bytes, collections: length zero is empty
    - values exposing ``is_zero()``: delegated
    - anything else: never empty
    """
    value, is_nil = indirect(value)
    if is_nil:
        return True
    kind = kind_of(value)
    if kind is Kind.BOOL:
        return not value
    if kind is Kind.NUMBER:
        return bool(value == 0)
    if kind in (Kind.TEXT, Kind.COLLECTION):
        return len(value) == 0
    if isinstance(value, ZeroCheckable):
        return bool(value.is_zero())
    return False


def string_or_bytes(value: Any) -> tuple[bool, str, bool, bytes]:
    """Split *value* into ``(is_str, str_value, is_bytes, bytes_value)``."""
    if isinstance(value, str):
        return True, value, False, b""
    if isinstance(value, bytes | bytearray):
        return False, "", True, bytes(value)
    return False, "", False, b""


def ensure_string(value: Any) -> str:
    """
    Narrow *value* to ``str``.

    Byte strings are decoded as UTF-8. Any other type raises a
    :class:`ValidationError` equal to :data:`ERR_NOT_STRING`.
    """
    is_str, text, is_bytes, raw = string_or_bytes(value)
    if is_str:
        return text
    if is_bytes:
        return raw.decode("utf-8", errors="replace")
    raise ValidationError(ERR_NOT_STRING.code, ERR_NOT_STRING.message)


def length_of(value: Any) -> int:
    """Length of a text or collection value."""
    if kind_of(value) in (Kind.TEXT, Kind.COLLECTION):
        return len(value)
    raise TypeError(f"cannot get the length of {type(value).__name__}")
