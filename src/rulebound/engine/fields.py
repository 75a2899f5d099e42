"""
Field registry for struct-like values.

For each struct-like type the registry lists the fields ``field()`` can
name, outer fields first, then (recursively) the fields of embedded
structs. Embedding is declared with ``Annotated[T, EMBEDDED]`` or with
dataclass field metadata ``{"embedded": True}``::

    @dataclass
    class Audit:
        created_by: str = ""

    @dataclass
    class Order:
        audit: Annotated[Audit, EMBEDDED]
        number: str = field(default="", metadata={"json": "order_number"})

    struct_fields(Order)  # audit, number, created_by

Registries are cached per ``(type, ValidationConfig)``.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel

from ..config import ValidationConfig, get_config
from ..values import indirect, is_struct

logger = logging.getLogger("rulebound.engine")

_REGISTRY_CACHE_MAX_SIZE = 1024


class _EmbeddedMarker:
    def __repr__(self) -> str:
        return "EMBEDDED"


EMBEDDED = _EmbeddedMarker()


@dataclass(frozen=True)
class StructField:
    """
    One addressable field.

    ``path`` is the attribute chain from the validated object; it has more
    than one element for fields promoted from embedded structs.
    """

    name: str
    error_name: str
    path: tuple[str, ...]
    embedded: bool = False

    def value_of(self, obj: Any) -> Any:
        for attr in self.path:
            obj, is_nil = indirect(obj)
            if is_nil:
                return None
            obj = getattr(obj, attr, None)
        return obj


_registry: dict[tuple[type, ValidationConfig], dict[str, StructField]] = {}


def struct_fields(
    cls: type, config: ValidationConfig | None = None
) -> dict[str, StructField]:
    """Ordered ``{attribute name: StructField}`` for *cls*."""
    if config is None:
        config = get_config()
    cache_key = (cls, config)
    cached = _registry.get(cache_key)
    if cached is not None:
        return cached
    fields = _collect(cls, config, (), frozenset())
    if len(_registry) >= _REGISTRY_CACHE_MAX_SIZE:
        _registry.clear()
    _registry[cache_key] = fields
    logger.debug("Built field registry for %s: %s", cls.__qualname__, list(fields))
    return fields


def clear_registry() -> None:
    _registry.clear()


def find_field(
    obj: Any, name: str, config: ValidationConfig | None = None
) -> StructField | None:
    """Look up *name* on *obj*, including plain instance attributes."""
    fields = struct_fields(type(obj), config)
    found = fields.get(name)
    if found is not None:
        return found
    if name in getattr(obj, "__dict__", {}):
        return StructField(name, name, (name,))
    return None


def available_fields(obj: Any, config: ValidationConfig | None = None) -> list[str]:
    names = list(struct_fields(type(obj), config))
    for name in getattr(obj, "__dict__", {}):
        if name not in names:
            names.append(name)
    return names


# ── Registry construction ────────────────────────────────────────────


def _collect(
    cls: type,
    config: ValidationConfig,
    prefix: tuple[str, ...],
    seen: frozenset[type],
) -> dict[str, StructField]:
    result: dict[str, StructField] = {}
    nested: list[tuple[str, type]] = []
    for name, error_name, embedded, hint in _declared_fields(cls, config):
        result[name] = StructField(name, error_name, (*prefix, name), embedded)
        target = _struct_type(hint) if embedded else None
        if target is not None and target not in seen:
            nested.append((name, target))

    for name, target in nested:
        promoted = _collect(target, config, (*prefix, name), seen | {cls})
        for field_name, struct_field in promoted.items():
            result.setdefault(field_name, struct_field)
    return result


def _declared_fields(
    cls: type, config: ValidationConfig
) -> list[tuple[str, str, bool, Any]]:
    """``(name, error_name, embedded, type hint)`` in declaration order."""
    declared: list[tuple[str, str, bool, Any]] = []
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        for name, info in cls.model_fields.items():
            alias = info.serialization_alias or info.alias
            error_name = alias if config.use_aliases and alias else name
            embedded = any(m is EMBEDDED for m in info.metadata)
            declared.append((name, error_name, embedded, info.annotation))
        return declared

    hints = _type_hints(cls)
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            hint = hints.get(f.name, f.type)
            tag = f.metadata.get(config.error_tag)
            if isinstance(tag, str) and tag and tag != "-":
                error_name = tag
            else:
                error_name = f.name
            embedded = bool(f.metadata.get("embedded")) or _is_marked(hint)
            declared.append((f.name, error_name, embedded, hint))
        return declared

    return [
        (name, name, _is_marked(hint), hint)
        for name, hint in hints.items()
        if get_origin(hint) is not ClassVar and hint is not ClassVar
    ]


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.debug("Could not resolve type hints of %s: %s", cls.__qualname__, exc)
        annotations: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            annotations.update(getattr(klass, "__annotations__", {}))
        return annotations


def _is_marked(hint: Any) -> bool:
    if get_origin(hint) is not Annotated:
        return False
    return any(m is EMBEDDED for m in hint.__metadata__)


def _struct_type(hint: Any) -> type | None:
    """Class held by an embedded field, through ``Annotated``/``Optional``."""
    if get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    if get_origin(hint) in (Union, types.UnionType):
        members = [a for a in get_args(hint) if a is not type(None)]
        if len(members) != 1:
            return None
        hint = members[0]
    if isinstance(hint, type) and not issubclass(hint, str | bytes | int | float):
        return hint
    return None


def resolve_path(
    obj: Any, path: str, config: ValidationConfig | None = None
) -> tuple[StructField, Any] | None:
    """
    Resolve a field name or dotted path (``"address.city"``) on *obj*.

    Returns the field (keyed by the joined error names) and its current
    value, or ``None`` when some segment does not exist. A nil value part
    way along the path yields ``None`` for the value.
    """
    head, _, rest = path.partition(".")
    found = find_field(obj, head, config)
    if found is None:
        return None
    value = found.value_of(obj)
    if not rest:
        return found, value

    nested, is_nil = indirect(value)
    if is_nil:
        missing = StructField(
            path, f"{found.error_name}.{rest}", (*found.path, *rest.split("."))
        )
        return missing, None
    if not is_struct(nested):
        return None
    inner = resolve_path(nested, rest, config)
    if inner is None:
        return None
    inner_field, inner_value = inner
    joined = StructField(
        path,
        f"{found.error_name}.{inner_field.error_name}",
        (*found.path, *inner_field.path),
    )
    return joined, inner_value
