"""Tests for kind dispatch, indirection and emptiness."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

import pytest
from pydantic import BaseModel, SecretStr

from rulebound.errors import ERR_NOT_STRING, ValidationError
from rulebound.values import (
    Kind,
    ensure_string,
    indirect,
    is_empty,
    is_struct,
    kind_of,
    length_of,
    string_or_bytes,
)

# --- Test Models ---


@dataclass
class Point:
    x: int = 0
    y: int = 0


class Account(BaseModel):
    name: str = ""


class Plain:
    def __init__(self) -> None:
        self.value = 1


class Color(Enum):
    RED = "red"


class Window:
    def __init__(self, start: datetime | None) -> None:
        self.start = start

    def is_zero(self) -> bool:
        return self.start is None


class Node:
    pass


# --- Tests ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, Kind.NIL),
        (True, Kind.BOOL),
        (0, Kind.NUMBER),
        (1.5, Kind.NUMBER),
        (Decimal("1"), Kind.NUMBER),
        ("abc", Kind.TEXT),
        (b"abc", Kind.TEXT),
        ([1], Kind.COLLECTION),
        ((1,), Kind.COLLECTION),
        ({"a": 1}, Kind.COLLECTION),
        ({1}, Kind.COLLECTION),
        (Point(), Kind.STRUCT),
        (Account(), Kind.STRUCT),
        (Plain(), Kind.STRUCT),
        (Color.RED, Kind.OTHER),
        (len, Kind.OTHER),
    ],
)
def test_kind_of(value: object, expected: Kind) -> None:
    assert kind_of(value) is expected


def test_classes_are_not_structs() -> None:
    assert not is_struct(Point)
    assert not is_struct(Account)
    assert not is_struct(pytest)


def test_indirect_plain_value() -> None:
    assert indirect(5) == (5, False)
    assert indirect(None) == (None, True)


def test_indirect_weakref() -> None:
    node = Node()
    ref = weakref.ref(node)
    assert indirect(ref) == (node, False)


def test_indirect_dead_weakref_is_nil() -> None:
    node = Node()
    ref = weakref.ref(node)
    del node
    assert indirect(ref) == (None, True)


def test_indirect_secret() -> None:
    assert indirect(SecretStr("hunter2")) == ("hunter2", False)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, True),
        (False, True),
        (True, False),
        (0, True),
        (0.0, True),
        (Decimal("0"), True),
        (7, False),
        ("", True),
        ("a", False),
        (b"", True),
        ([], True),
        ([0], False),
        ({}, True),
        ({"a": None}, False),
        (set(), True),
        (SecretStr(""), True),
        (Point(), False),
        (Window(None), True),
        (Window(datetime(2020, 1, 1)), False),
        (Color.RED, False),
    ],
)
def test_is_empty(value: object, expected: bool) -> None:
    assert is_empty(value) is expected


def test_string_or_bytes() -> None:
    assert string_or_bytes("a") == (True, "a", False, b"")
    assert string_or_bytes(bytearray(b"a")) == (False, "", True, b"a")
    assert string_or_bytes(1) == (False, "", False, b"")


def test_ensure_string() -> None:
    assert ensure_string("abc") == "abc"
    assert ensure_string(b"abc") == "abc"


def test_ensure_string_rejects_other_types() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ensure_string(123)
    assert exc_info.value == ERR_NOT_STRING
    assert exc_info.value is not ERR_NOT_STRING


def test_length_of() -> None:
    assert length_of("héllo") == 5
    assert length_of([1, 2]) == 2
    with pytest.raises(TypeError, match="cannot get the length of int"):
        length_of(1)
