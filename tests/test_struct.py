"""Tests for struct validation and the field registry."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Annotated, Any

import pytest
from pydantic import BaseModel, Field

from rulebound import (
    EMBEDDED,
    NOT_NIL,
    REQUIRED,
    SKIP,
    FieldNotFoundError,
    FieldSpecError,
    InternalError,
    StructRequiredError,
    ValidationConfig,
    background,
    by,
    each,
    field,
    length,
    use_config,
    validate,
    validate_struct,
    validate_struct_with_context,
)
from rulebound.engine.fields import struct_fields

# --- Test Models ---


def _check_abc(value: Any) -> Exception | None:
    if value != "abc":
        return ValueError("error abc")
    return None


class String123(str):
    def validate(self) -> Exception | None:
        if self != "123":
            return ValueError("error 123")
        return None


@dataclass
class Model1:
    A: str = ""
    B: str = ""
    c: str = ""
    D: str | None = None
    E: String123 = String123("")
    F: String123 | None = None
    G: str = dataclasses.field(default="", metadata={"json": "g"})
    H: list[str] = dataclasses.field(default_factory=list)
    I: dict[str, str] = dataclasses.field(default_factory=dict)  # noqa: E741
    J: str = dataclasses.field(default="", metadata={"json": "-", "yaml": "jay"})


@dataclass
class Model3:
    A: str = ""

    def validate(self) -> Exception | None:
        return validate_struct(self, field("A", by(_check_abc)))


@dataclass
class Model2:
    base: Annotated[Model3, EMBEDDED] = dataclasses.field(default_factory=Model3)
    M3: Model3 = dataclasses.field(default_factory=Model3)
    B: str = ""


@dataclass
class Optional3:
    base: Model3 | None = dataclasses.field(default=None, metadata={"embedded": True})
    S1: str = ""


@dataclass
class Shadowing:
    A: str = "outer"
    base: Annotated[Model3, EMBEDDED] = dataclasses.field(default_factory=Model3)


@dataclass
class Address:
    city: str = ""


@dataclass
class Customer:
    name: str = ""
    address: Address | None = None


class Profile(BaseModel):
    full_name: str = Field(default="", alias="fullName")
    nickname: str = ""


class Plain:
    def __init__(self) -> None:
        self.name = ""
        self.age = 3


@pytest.fixture
def m1() -> Model1:
    return Model1(
        A="abc",
        B="xyz",
        c="abc",
        G="xyz",
        H=["abc", "abc"],
        I={"foo": "abc"},
    )


def _check(err: Exception | None) -> str:
    return "" if err is None else str(err)


# --- Tests ---


def test_no_field_rules(m1: Model1) -> None:
    assert validate_struct(m1) is None
    assert validate_struct(m1, field("A"), field("B")) is None


def test_field_rules(m1: Model1, abc_rule: Any, xyz_rule: Any) -> None:
    assert validate_struct(m1, field("A", abc_rule), field("B", xyz_rule)) is None
    err = validate_struct(m1, field("A", xyz_rule), field("B", abc_rule))
    assert _check(err) == "A: error xyz; B: error abc."
    err = validate_struct(m1, field("A", xyz_rule), field("c", xyz_rule))
    assert _check(err) == "A: error xyz; c: error xyz."


def test_nil_fields_pass_leaf_rules(m1: Model1) -> None:
    assert validate_struct(m1, field("D", length(0, 5))) is None
    assert validate_struct(m1, field("F", length(0, 5))) is None


def test_nested_collection_errors(m1: Model1, abc_rule: Any, xyz_rule: Any) -> None:
    rules = (field("H", each(abc_rule)), field("I", each(abc_rule)))
    assert validate_struct(m1, *rules) is None
    err = validate_struct(m1, field("H", each(xyz_rule)), field("I", each(xyz_rule)))
    assert _check(err) == "H: (0: error xyz; 1: error xyz.); I: (foo: error xyz.)."


def test_non_struct_values() -> None:
    assert validate_struct(None) is None
    for value in (123, "abc", {"A": 1}, [1], Model1):
        err = validate_struct(value)
        assert isinstance(err, InternalError)
        assert isinstance(err.internal_error, StructRequiredError)
        assert str(err) == "only a struct object can be validated"


def test_invalid_field_spec(m1: Model1) -> None:
    err = validate_struct(m1, field(123))  # type: ignore[arg-type]
    assert isinstance(err, InternalError)
    assert isinstance(err.internal_error, FieldSpecError)
    assert str(err) == "field #0 must be specified as a field name"


def test_unknown_field(m1: Model1) -> None:
    err = validate_struct(m1, field("A"), field("Z", REQUIRED))
    assert isinstance(err, InternalError)
    assert str(err) == "field #1 cannot be found in the struct"
    assert isinstance(err.internal_error, FieldNotFoundError)
    assert "A" in err.internal_error.available_fields


def test_error_key_from_metadata(m1: Model1, abc_rule: Any) -> None:
    assert _check(validate_struct(m1, field("G", abc_rule))) == "g: error abc."
    err = validate_struct(Model1(J="x"), field("J", abc_rule))
    assert _check(err) == "J: error abc."


def test_error_tag_is_configurable(abc_rule: Any) -> None:
    with use_config(ValidationConfig(error_tag="yaml")):
        err = validate_struct(
            Model1(J="x", G="x"), field("J", abc_rule), field("G", abc_rule)
        )
    assert _check(err) == "G: error abc; jay: error abc."


def test_self_validating_field() -> None:
    m2 = Model1(E=String123("xyz"))
    assert _check(validate_struct(m2, field("E"))) == "E: error 123."
    assert validate_struct(m2, field("E", SKIP)) is None
    assert validate_struct(m2, field("E", SKIP.when(True))) is None
    assert _check(validate_struct(m2, field("E", SKIP.when(False)))) == "E: error 123."


@pytest.mark.parametrize(
    ("rules", "expected"),
    [
        ((REQUIRED,), "F: cannot be blank."),
        ((NOT_NIL,), "F: is required."),
        ((SKIP, REQUIRED), ""),
        ((SKIP, NOT_NIL), ""),
        ((SKIP.when(True), REQUIRED), ""),
        ((SKIP.when(True), NOT_NIL), ""),
        ((SKIP.when(False), REQUIRED), "F: cannot be blank."),
        ((SKIP.when(False), NOT_NIL), "F: is required."),
    ],
)
def test_required_and_not_nil(rules: tuple[Any, ...], expected: str) -> None:
    m2 = Model1(E=String123("xyz"))
    assert _check(validate_struct(m2, field("F", *rules))) == expected


def test_embedded_structs() -> None:
    m3 = Model2()
    m4 = Model2(M3=Model3(A="abc"), base=Model3(A="abc"))
    assert validate_struct(m3, field("M3", SKIP)) is None
    assert _check(validate_struct(m3, field("M3"))) == "M3: (A: error abc.)."
    assert validate_struct(m3, field("base", SKIP)) is None
    assert _check(validate_struct(m3, field("base"))) == "A: error abc."
    assert validate_struct(m4, field("M3")) is None
    assert validate_struct(m4, field("base")) is None


def test_promoted_fields() -> None:
    err = validate_struct(Model2(), field("A", REQUIRED), field("B", REQUIRED))
    assert _check(err) == "A: cannot be blank; B: cannot be blank."
    assert validate_struct(Model2(base=Model3(A="x")), field("A", REQUIRED)) is None


def test_promoted_field_through_nil_embedding() -> None:
    assert validate_struct(Optional3(), field("A", length(1, 2))) is None
    err = validate_struct(Optional3(), field("A", REQUIRED))
    assert _check(err) == "A: cannot be blank."
    filled = Optional3(base=Model3(A="abc"))
    assert validate_struct(filled, field("A", REQUIRED)) is None


def test_outer_fields_shadow_embedded_ones() -> None:
    assert list(struct_fields(Model2)) == ["base", "M3", "B", "A"]
    found = struct_fields(Shadowing)["A"]
    assert found.path == ("A",)
    err = validate_struct(Shadowing(A=""), field("A", REQUIRED))
    assert _check(err) == "A: cannot be blank."


def test_internal_error_aborts(abc_rule: Any, internal_rule: Any) -> None:
    m5 = Model2(base=Model3(A="internal"))
    err = validate_struct(
        m5,
        field("A", abc_rule),
        field("B", REQUIRED),
        field("A", internal_rule),
    )
    assert isinstance(err, InternalError)
    assert str(err) == "error internal"


def test_embedded_struct_validates_itself() -> None:
    assert _check(validate(Model3())) == "A: error abc."


def test_struct_validation_is_idempotent(m1: Model1, xyz_rule: Any) -> None:
    rules = (field("A", xyz_rule), field("c", xyz_rule))
    first = validate_struct(m1, *rules)
    second = validate_struct(m1, *rules)
    assert str(first) == str(second) == "A: error xyz; c: error xyz."


def test_anonymous_style_example() -> None:
    @dataclass
    class Pair:
        Name: str
        Value: str

    pair = Pair("name", "demo")
    err = validate_struct(
        pair,
        field("Name", REQUIRED),
        field("Value", REQUIRED, length(5, 10)),
    )
    assert _check(err) == "Value: the length must be between 5 and 10."


def test_pydantic_aliases() -> None:
    profile = Profile(fullName="")
    err = validate_struct(
        profile, field("full_name", REQUIRED), field("nickname", REQUIRED)
    )
    assert _check(err) == "fullName: cannot be blank; nickname: cannot be blank."
    with use_config(ValidationConfig(use_aliases=False)):
        err = validate_struct(profile, field("full_name", REQUIRED))
    assert _check(err) == "full_name: cannot be blank."


def test_plain_objects() -> None:
    err = validate_struct(Plain(), field("name", REQUIRED), field("age", REQUIRED))
    assert _check(err) == "name: cannot be blank."


def test_dotted_paths() -> None:
    customer = Customer(name="x", address=Address(city=""))
    err = validate_struct(customer, field("address.city", REQUIRED))
    assert _check(err) == "address.city: cannot be blank."
    paris = Customer(address=Address("Paris"))
    assert validate_struct(paris, field("address.city", REQUIRED)) is None


def test_dotted_path_through_nil() -> None:
    err = validate_struct(Customer(), field("address.city", REQUIRED))
    assert _check(err) == "address.city: cannot be blank."


def test_dotted_path_unknown_segment() -> None:
    err = validate_struct(Customer(address=Address()), field("address.zip"))
    assert isinstance(err, InternalError)
    assert isinstance(err.internal_error, FieldNotFoundError)


def test_with_context(ctx_abc_rule: Any, ctx_xyz_rule: Any, m1: Model1) -> None:
    ctx = background()
    assert validate_struct_with_context(ctx, m1, field("A", ctx_abc_rule)) is None
    err = validate_struct_with_context(
        ctx, m1, field("A", ctx_xyz_rule), field("B", ctx_abc_rule)
    )
    assert _check(err) == "A: error xyz; B: error abc."
    err = validate_struct_with_context(ctx, m1, field("G", ctx_abc_rule))
    assert _check(err) == "g: error abc."
    assert validate_struct_with_context(ctx, m1, field("G", SKIP, ctx_abc_rule)) is None
    err = validate_struct_with_context(ctx, m1, field("G", ctx_abc_rule, SKIP))
    assert _check(err) == "g: error abc."
