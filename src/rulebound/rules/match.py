"""match() — regular-expression format check."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

from ..errors import ERR_MATCH_INVALID, ValidationError
from ..values import indirect, string_or_bytes


@dataclass(frozen=True)
class MatchRule:
    pattern: re.Pattern[str]
    err: ValidationError = ERR_MATCH_INVALID

    def validate(self, value: Any) -> Exception | None:
        value, is_nil = indirect(value)
        if is_nil:
            return None
        is_str, text, is_bytes, raw = string_or_bytes(value)
        if is_str and (text == "" or self.pattern.search(text)):
            return None
        if is_bytes and (
            not raw or self.pattern.search(raw.decode("utf-8", errors="replace"))
        ):
            return None
        return self.err

    def error(self, message: str) -> MatchRule:
        return replace(self, err=self.err.set_message(message))

    def error_object(self, err: ValidationError) -> MatchRule:
        return replace(self, err=err)


def match(pattern: str | re.Pattern[str]) -> MatchRule:
    """
    Check that a string (or UTF-8 bytes) value matches *pattern*.

    The pattern is searched, not anchored; use ``^``/``$`` to anchor it.
    Values that are neither text nor bytes fail, even empty ones such as
    ``0`` or ``[]``. An empty string or ``None`` is valid.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return MatchRule(pattern)
