"""Shared fixtures for rulebound tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from rulebound.config import set_config
from rulebound.context import ValidationContext
from rulebound.engine.fields import clear_registry
from rulebound.errors import new_internal_error


class ExpectRule:
    """Fails any string other than ``expected``; ignores other types."""

    def __init__(self, expected: str) -> None:
        self.expected = expected

    def validate(self, value: Any) -> Exception | None:
        if isinstance(value, str) and value != self.expected:
            return ValueError(f"error {self.expected}")
        return None


class ContextExpectRule:
    """Context-only variant of :class:`ExpectRule`."""

    def __init__(self, expected: str) -> None:
        self.expected = expected

    def validate_with_context(
        self, ctx: ValidationContext, value: Any
    ) -> Exception | None:
        if isinstance(value, str) and value != self.expected:
            return ValueError(f"error {self.expected}")
        return None


class InternalFailureRule:
    def validate(self, value: Any) -> Exception | None:
        if value == "internal":
            return new_internal_error(ValueError("error internal"))
        return None


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    yield
    set_config(None)
    clear_registry()


@pytest.fixture
def abc_rule() -> ExpectRule:
    return ExpectRule("abc")


@pytest.fixture
def xyz_rule() -> ExpectRule:
    return ExpectRule("xyz")


@pytest.fixture
def ctx_abc_rule() -> ContextExpectRule:
    return ContextExpectRule("abc")


@pytest.fixture
def ctx_xyz_rule() -> ContextExpectRule:
    return ContextExpectRule("xyz")


@pytest.fixture
def internal_rule() -> InternalFailureRule:
    return InternalFailureRule()
