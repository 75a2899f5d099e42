"""
rulebound — declarative, composable validation rules.

Usage::

    from rulebound import REQUIRED, field, length, validate_struct
    from rulebound.formats import EMAIL

    err = validate_struct(
        customer,
        field("name", REQUIRED, length(5, 20)),
        field("email", REQUIRED, EMAIL),
    )
    if err is not None:
        print(err)  # "email: must be a valid email address; name: ..."
"""

from .combinators import (
    ContextFuncRule,
    InlineRule,
    WhenRule,
    by,
    when,
    with_context,
)
from .config import ValidationConfig, get_config, set_config, use_config
from .context import ValidationContext, background
from .engine import (
    EMBEDDED,
    EachRule,
    FieldRules,
    KeyRules,
    MapRule,
    each,
    field,
    key,
    map_,
    validate,
    validate_struct,
    validate_struct_with_context,
    validate_with_context,
)
from .errors import (
    ERR_DATE_INVALID,
    ERR_DATE_OUT_OF_RANGE,
    ERR_EMPTY,
    ERR_IN_INVALID,
    ERR_KEY_MISSING,
    ERR_KEY_UNEXPECTED,
    ERR_KEY_WRONG_TYPE,
    ERR_LENGTH_EMPTY_REQUIRED,
    ERR_LENGTH_INVALID,
    ERR_LENGTH_OUT_OF_RANGE,
    ERR_LENGTH_TOO_LONG,
    ERR_LENGTH_TOO_SHORT,
    ERR_MATCH_INVALID,
    ERR_MAX_LESS_EQUAL_THAN_REQUIRED,
    ERR_MAX_LESS_THAN_REQUIRED,
    ERR_MIN_GREATER_EQUAL_THAN_REQUIRED,
    ERR_MIN_GREATER_THAN_REQUIRED,
    ERR_MULTIPLE_OF_INVALID,
    ERR_NIL,
    ERR_NIL_OR_NOT_EMPTY,
    ERR_NOT_IN_INVALID,
    ERR_NOT_ITERABLE,
    ERR_NOT_NIL_REQUIRED,
    ERR_NOT_STRING,
    ERR_REQUIRED,
    Errors,
    FieldNotFoundError,
    FieldSpecError,
    InternalError,
    MapRequiredError,
    RuleboundError,
    StructRequiredError,
    ValidationError,
    is_internal,
    new_error,
    new_internal_error,
)
from .ports import ContextRule, Rule, Validatable, ValidatableWithContext
from .rules import (
    EMPTY,
    NIL,
    NIL_OR_NOT_EMPTY,
    NOT_NIL,
    REQUIRED,
    SKIP,
    date,
    errors_from_pydantic,
    in_,
    length,
    match,
    max_,
    min_,
    model,
    multiple_of,
    new_string_rule,
    new_string_rule_with_error,
    not_in,
)
from .values import Kind, ensure_string, indirect, is_empty, kind_of

__all__ = [
    # Entry points
    "validate",
    "validate_with_context",
    "validate_struct",
    "validate_struct_with_context",
    # Composites
    "EMBEDDED",
    "EachRule",
    "FieldRules",
    "KeyRules",
    "MapRule",
    "each",
    "field",
    "key",
    "map_",
    # Combinators
    "ContextFuncRule",
    "InlineRule",
    "WhenRule",
    "by",
    "when",
    "with_context",
    # Leaf rules
    "EMPTY",
    "NIL",
    "NIL_OR_NOT_EMPTY",
    "NOT_NIL",
    "REQUIRED",
    "SKIP",
    "date",
    "errors_from_pydantic",
    "in_",
    "length",
    "match",
    "max_",
    "min_",
    "model",
    "multiple_of",
    "new_string_rule",
    "new_string_rule_with_error",
    "not_in",
    # Context & configuration
    "ValidationContext",
    "background",
    "ValidationConfig",
    "get_config",
    "set_config",
    "use_config",
    # Protocols
    "ContextRule",
    "Rule",
    "Validatable",
    "ValidatableWithContext",
    # Values
    "Kind",
    "ensure_string",
    "indirect",
    "is_empty",
    "kind_of",
    # Errors
    "RuleboundError",
    "ValidationError",
    "Errors",
    "InternalError",
    "StructRequiredError",
    "MapRequiredError",
    "FieldSpecError",
    "FieldNotFoundError",
    "is_internal",
    "new_error",
    "new_internal_error",
    # Error templates
    "ERR_DATE_INVALID",
    "ERR_DATE_OUT_OF_RANGE",
    "ERR_EMPTY",
    "ERR_IN_INVALID",
    "ERR_KEY_MISSING",
    "ERR_KEY_UNEXPECTED",
    "ERR_KEY_WRONG_TYPE",
    "ERR_LENGTH_EMPTY_REQUIRED",
    "ERR_LENGTH_INVALID",
    "ERR_LENGTH_OUT_OF_RANGE",
    "ERR_LENGTH_TOO_LONG",
    "ERR_LENGTH_TOO_SHORT",
    "ERR_MATCH_INVALID",
    "ERR_MAX_LESS_EQUAL_THAN_REQUIRED",
    "ERR_MAX_LESS_THAN_REQUIRED",
    "ERR_MIN_GREATER_EQUAL_THAN_REQUIRED",
    "ERR_MIN_GREATER_THAN_REQUIRED",
    "ERR_MULTIPLE_OF_INVALID",
    "ERR_NIL",
    "ERR_NIL_OR_NOT_EMPTY",
    "ERR_NOT_IN_INVALID",
    "ERR_NOT_ITERABLE",
    "ERR_NOT_NIL_REQUIRED",
    "ERR_NOT_STRING",
    "ERR_REQUIRED",
]
