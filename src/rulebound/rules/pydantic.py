"""model() — delegate validation of a payload to a pydantic model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import Errors, ValidationError
from ..values import indirect

ROOT_KEY = "__root__"


def errors_from_pydantic(exc: PydanticValidationError) -> Errors:
    """
    Convert a pydantic ``ValidationError`` into a nested :class:`Errors`.

    Each error location becomes a path of keys; the first error reported
    for a location wins. Errors without a location are stored under
    ``"__root__"``::

        {"address": {"city": "Field required"}}
    """
    result = Errors()
    for error in exc.errors():
        loc = tuple(str(p) for p in error.get("loc", ())) or (ROOT_KEY,)
        err = ValidationError(
            f"pydantic_{error.get('type', 'error')}",
            error.get("msg", "validation error"),
        )
        node = result
        for part in loc[:-1]:
            child = node.get(part)
            if child is None:
                child = Errors()
                node[part] = child
            if not isinstance(child, Errors):
                break
            node = child
        else:
            node.setdefault(loc[-1], err)
    return result


@dataclass(frozen=True)
class PydanticRule:
    """
    Validates a mapping or model instance through ``model_type``.

    Model instances are re-validated from their dump (matched by field
    name, so aliased fields round-trip), and assignments that bypassed
    validation are caught.
    """

    model_type: type[BaseModel]

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil:
            return None
        by_name: bool | None = None
        if isinstance(value, BaseModel):
            value, by_name = value.model_dump(), True
        try:
            self.model_type.model_validate(value, by_name=by_name)
        except PydanticValidationError as exc:
            return errors_from_pydantic(exc)
        return None


def model(model_type: type[BaseModel]) -> PydanticRule:
    return PydanticRule(model_type)
