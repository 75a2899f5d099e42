"""validate_struct() — validate selected fields of a struct-like object."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..config import get_config
from ..errors import (
    Errors,
    FieldNotFoundError,
    FieldSpecError,
    StructRequiredError,
    is_internal,
    new_internal_error,
)
from ..values import indirect, is_struct
from .core import validate_value
from .fields import available_fields, resolve_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..context import ValidationContext

logger = logging.getLogger("rulebound.engine")


@dataclass(frozen=True)
class FieldRules:
    """Rules bound to one field (attribute name or dotted path)."""

    name: Any
    rules: tuple[Any, ...] = ()


def field(name: str, *rules: Any) -> FieldRules:
    return FieldRules(name, rules)


def validate_struct(obj: Any, *fields: FieldRules) -> Exception | None:
    """
    Validate the named fields of *obj*.

    Field failures are collected into an :class:`~rulebound.errors.Errors`
    keyed by each field's error name::

        validate_struct(
            customer,
            field("name", REQUIRED, length(5, 20)),
            field("email", REQUIRED, EMAIL),
            field("address"),
        )

    Fields promoted from an embedded struct report their failures directly
    in this aggregate rather than nested under the embedding field. A
    ``None`` object is valid; any other non-struct value, an unknown field
    or an internal rule failure aborts with an
    :class:`~rulebound.errors.InternalError`.
    """
    return _validate_struct(None, obj, fields)


def validate_struct_with_context(
    ctx: ValidationContext, obj: Any, *fields: FieldRules
) -> Exception | None:
    return _validate_struct(ctx, obj, fields)


def _validate_struct(
    ctx: ValidationContext | None, obj: Any, fields: Sequence[FieldRules]
) -> Exception | None:
    obj, is_nil = indirect(obj)
    if is_nil:
        return None
    if not is_struct(obj):
        return new_internal_error(StructRequiredError())

    config = get_config()
    errs = Errors()
    for index, bound in enumerate(fields):
        if not isinstance(bound.name, str):
            return new_internal_error(FieldSpecError(index))
        resolved = resolve_path(obj, bound.name, config)
        if resolved is None:
            return new_internal_error(
                FieldNotFoundError(index, bound.name, available_fields(obj, config))
            )
        struct_field, value = resolved

        err = validate_value(ctx, value, bound.rules)
        if err is None:
            continue
        if is_internal(err):
            logger.debug(
                "Field %r of %s failed internally, aborting",
                bound.name,
                type(obj).__qualname__,
            )
            return err
        if struct_field.embedded and isinstance(err, Errors):
            errs.update(err)
        else:
            errs[struct_field.error_name] = err
    return errs.filter()
