"""Leaf rules: checks on a single value that do not descend into it."""

from __future__ import annotations

from .absent import EMPTY, NIL, NOT_NIL, AbsentRule, NotNilRule
from .date import DateRule, date
from .length import LengthRule, length
from .match import MatchRule, match
from .membership import InRule, NotInRule, in_, not_in
from .multiple_of import MultipleOfRule, multiple_of
from .pydantic import PydanticRule, errors_from_pydantic, model
from .required import NIL_OR_NOT_EMPTY, REQUIRED, RequiredRule
from .skip import SKIP, SkipRule, is_active_skip
from .string import StringRule, new_string_rule, new_string_rule_with_error
from .threshold import ThresholdRule, max_, min_

__all__ = [
    "EMPTY",
    "NIL",
    "NIL_OR_NOT_EMPTY",
    "NOT_NIL",
    "REQUIRED",
    "SKIP",
    "AbsentRule",
    "DateRule",
    "InRule",
    "LengthRule",
    "MatchRule",
    "MultipleOfRule",
    "NotInRule",
    "NotNilRule",
    "PydanticRule",
    "RequiredRule",
    "SkipRule",
    "StringRule",
    "ThresholdRule",
    "date",
    "errors_from_pydantic",
    "in_",
    "is_active_skip",
    "length",
    "match",
    "max_",
    "min_",
    "model",
    "multiple_of",
    "new_string_rule",
    "new_string_rule_with_error",
    "not_in",
]
