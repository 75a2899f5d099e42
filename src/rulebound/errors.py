"""
Validation error model.

A single failure is a :class:`ValidationError` (code, message template,
params). Field- or key-attributed failures are collected into an
:class:`Errors` aggregate, which may nest. Failures that are not about the
validated value (caller misuse, broken rules) are wrapped in
:class:`InternalError` and abort aggregation.

All error types inherit from ``RuleboundError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, MutableMapping
from difflib import get_close_matches
from typing import Any

logger = logging.getLogger("rulebound.errors")


class _KeepMissing(dict[str, Any]):
    """Params mapping that renders unknown placeholders verbatim."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class RuleboundError(Exception):
    """Root exception for the rulebound package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(RuleboundError):
    """
    A single validation failure.

    Instances are treated as immutable: every ``set_*``/``add_param`` call
    returns a new error and leaves the receiver (often a module-level
    template such as :data:`ERR_REQUIRED`) untouched.

    The message is a :meth:`str.format` template rendered against
    ``params`` when the error is converted to a string::

        err = new_error("validation_length_too_long", "must be at most {max}")
        str(err.set_params({"max": 5}))  # "must be at most 5"
    """

    def __init__(
        self,
        code: str,
        message: str,
        params: dict[str, Any] | None = None,
    ) -> None:
        self._code = code
        self._message = message
        self._params: dict[str, Any] = dict(params or {})
        super().__init__(message)

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)

    # ── Copy-producing setters ───────────────────────────────────

    def set_code(self, code: str) -> ValidationError:
        return ValidationError(code, self._message, self._params)

    def set_message(self, message: str) -> ValidationError:
        return ValidationError(self._code, message, self._params)

    def set_params(self, params: dict[str, Any]) -> ValidationError:
        return ValidationError(self._code, self._message, params)

    def add_param(self, name: str, value: Any) -> ValidationError:
        params = dict(self._params)
        params[name] = value
        return ValidationError(self._code, self._message, params)

    # ── Rendering ────────────────────────────────────────────────

    def __str__(self) -> str:
        if not self._params:
            return self._message
        try:
            return self._message.format_map(_KeepMissing(self._params))
        except (ValueError, IndexError, AttributeError) as exc:
            logger.warning(
                "Failed to render message template %r for %s: %s",
                self._message,
                self._code,
                exc,
            )
            return self._message

    def __repr__(self) -> str:
        return f"ValidationError(code={self._code!r}, message={self._message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            self._code == other._code
            and self._message == other._message
            and self._params == other._params
        )

    def __hash__(self) -> int:
        return hash((self._code, self._message))

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self._code,
            "message": str(self),
            "params": dict(self._params),
        }


class Errors(RuleboundError, MutableMapping[str, "Exception | None"]):
    """
    Field/key-to-error aggregate.

    Values are plain errors or nested ``Errors``. Rendering and
    serialisation always walk keys in sorted order so output is stable::

        Errors({"B": ValueError("B1"), "A": ValueError("A1")})
        # str() -> "A: A1; B: B1."
    """

    # exceptions stay hashable by identity
    __hash__ = RuleboundError.__hash__

    def __init__(
        self, errors: MutableMapping[str, Exception | None] | None = None
    ) -> None:
        self._errors: dict[str, Exception | None] = dict(errors or {})
        super().__init__()

    # ── Mapping protocol ─────────────────────────────────────────

    def __getitem__(self, key: str) -> Exception | None:
        return self._errors[key]

    def __setitem__(self, key: str, value: Exception | None) -> None:
        self._errors[key] = value

    def __delitem__(self, key: str) -> None:
        del self._errors[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Errors):
            return self._errors == other._errors
        if isinstance(other, dict):
            return self._errors == other
        return NotImplemented

    # ── Aggregate operations ─────────────────────────────────────

    def filter(self) -> Errors | None:
        """Drop ``None`` entries in place; return ``None`` when nothing is left."""
        for key in [k for k, v in self._errors.items() if v is None]:
            del self._errors[key]
        if not self._errors:
            return None
        return self

    def _sorted_items(self) -> list[tuple[str, Exception]]:
        items: list[tuple[str, Exception]] = []
        for key in sorted(self._errors):
            err = self._errors[key]
            if err is not None:
                items.append((key, err))
        return items

    def __str__(self) -> str:
        parts: list[str] = []
        for key, err in self._sorted_items():
            if isinstance(err, Errors):
                parts.append(f"{key}: ({err})")
            else:
                parts.append(f"{key}: {err}")
        if not parts:
            return ""
        return "; ".join(parts) + "."

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"

    def to_dict(self) -> dict[str, Any]:
        """Nested ``{key: message | {...}}`` tree with sorted keys."""
        tree: dict[str, Any] = {}
        for key, err in self._sorted_items():
            tree[key] = err.to_dict() if isinstance(err, Errors) else str(err)
        return tree

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


class InternalError(RuleboundError):
    """
    Wraps a failure unrelated to the validity of the input.

    The traversal engine never stores an ``InternalError`` in an
    :class:`Errors` aggregate; it stops and hands it back to the caller.
    """

    def __init__(self, error: Exception) -> None:
        self._internal = error
        super().__init__(str(error))

    @property
    def internal_error(self) -> Exception:
        return self._internal

    def __str__(self) -> str:
        return str(self._internal)

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self._internal, RuleboundError):
            return self._internal.to_dict()
        return super().to_dict()


def new_error(code: str, message: str) -> ValidationError:
    """Create a validation error template."""
    return ValidationError(code, message)


def new_internal_error(error: Exception) -> InternalError:
    """Wrap *error* so that validation aborts with it."""
    return InternalError(error)


def is_internal(error: Exception | None) -> bool:
    return isinstance(error, InternalError)


# ── Structural errors ────────────────────────────────────────────────


class StructRequiredError(RuleboundError):
    """Raised (wrapped) when struct validation receives a non-struct value."""

    def __init__(self) -> None:
        super().__init__("only a struct object can be validated")


class MapRequiredError(RuleboundError):
    """Raised (wrapped) when map validation receives a non-mapping value."""

    def __init__(self) -> None:
        super().__init__("only a map can be validated")


class FieldSpecError(RuleboundError):
    """A ``field()`` binding was not given a field name."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"field #{index} must be specified as a field name")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_SPEC_INVALID",
            "index": self.index,
            "message": str(self),
        }


class FieldNotFoundError(RuleboundError):
    """
    A ``field()`` binding names a field the struct does not have.

    Close matches among the struct's fields are kept in ``suggestions``.
    """

    def __init__(
        self,
        index: int,
        name: str = "",
        available_fields: list[str] | None = None,
    ) -> None:
        self.index = index
        self.name = name
        self.available_fields = list(available_fields or [])
        self.suggestions = get_close_matches(
            name, self.available_fields, n=3, cutoff=0.6
        )
        super().__init__(f"field #{index} cannot be found in the struct")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "index": self.index,
            "field": self.name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


# ── Error templates ──────────────────────────────────────────────────

ERR_REQUIRED = new_error("validation_required", "cannot be blank")
ERR_NIL_OR_NOT_EMPTY = new_error(
    "validation_nil_or_not_empty_required", "cannot be blank"
)
ERR_NIL = new_error("validation_nil", "must be blank")
ERR_EMPTY = new_error("validation_empty", "must be blank")
ERR_NOT_NIL_REQUIRED = new_error("validation_not_nil_required", "is required")

ERR_IN_INVALID = new_error("validation_in_invalid", "must be a valid value")
ERR_NOT_IN_INVALID = new_error("validation_not_in_invalid", "must not be in list")
ERR_MATCH_INVALID = new_error("validation_match_invalid", "must be in a valid format")

ERR_DATE_INVALID = new_error("validation_date_invalid", "must be a valid date")
ERR_DATE_OUT_OF_RANGE = new_error(
    "validation_date_out_of_range", "the date is out of range"
)

ERR_LENGTH_TOO_LONG = new_error(
    "validation_length_too_long", "the length must be no more than {max}"
)
ERR_LENGTH_TOO_SHORT = new_error(
    "validation_length_too_short", "the length must be no less than {min}"
)
ERR_LENGTH_INVALID = new_error(
    "validation_length_invalid", "the length must be exactly {min}"
)
ERR_LENGTH_OUT_OF_RANGE = new_error(
    "validation_length_out_of_range", "the length must be between {min} and {max}"
)
ERR_LENGTH_EMPTY_REQUIRED = new_error(
    "validation_length_empty_required", "the value must be empty"
)

ERR_MULTIPLE_OF_INVALID = new_error(
    "validation_multiple_of_invalid", "must be multiple of {base}"
)

ERR_MIN_GREATER_EQUAL_THAN_REQUIRED = new_error(
    "validation_min_greater_equal_than_required", "must be no less than {threshold}"
)
ERR_MAX_LESS_EQUAL_THAN_REQUIRED = new_error(
    "validation_max_less_equal_than_required", "must be no greater than {threshold}"
)
ERR_MIN_GREATER_THAN_REQUIRED = new_error(
    "validation_min_greater_than_required", "must be greater than {threshold}"
)
ERR_MAX_LESS_THAN_REQUIRED = new_error(
    "validation_max_less_than_required", "must be less than {threshold}"
)

ERR_NOT_STRING = new_error(
    "validation_not_string", "must be either a string or byte slice"
)
ERR_NOT_ITERABLE = new_error(
    "validation_not_iterable", "must be an iterable (map, slice or array)"
)

ERR_KEY_WRONG_TYPE = new_error("validation_key_wrong_type", "key not the correct type")
ERR_KEY_MISSING = new_error("validation_key_missing", "required key is missing")
ERR_KEY_UNEXPECTED = new_error("validation_key_unexpected", "key not expected")
