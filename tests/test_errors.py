"""Tests for the error model."""

from __future__ import annotations

import json
import logging

import pytest

from rulebound.errors import (
    ERR_LENGTH_OUT_OF_RANGE,
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

# -- ValidationError ---------------------------------------------------------


def test_new_error_accessors() -> None:
    err = new_error("abc", "123")
    assert err.code == "abc"
    assert err.message == "123"
    assert err.params == {}
    assert str(err) == "123"


def test_setters_return_new_instances() -> None:
    err = new_error("code", "message")
    renamed = err.set_code("other")
    reworded = err.set_message("changed")
    with_params = err.set_params({"min": 1})

    assert err.code == "code"
    assert err.message == "message"
    assert err.params == {}
    assert renamed.code == "other"
    assert reworded.message == "changed"
    assert with_params.params == {"min": 1}


def test_add_param_does_not_touch_receiver() -> None:
    base = new_error("code", "{a} and {b}").set_params({"a": 1})
    extended = base.add_param("b", 2)

    assert base.params == {"a": 1}
    assert extended.params == {"a": 1, "b": 2}
    assert str(extended) == "1 and 2"


def test_params_property_is_a_copy() -> None:
    err = new_error("code", "{x}").set_params({"x": 1})
    params = err.params
    params["x"] = 99
    assert str(err) == "1"


def test_message_template_rendering() -> None:
    err = ERR_LENGTH_OUT_OF_RANGE.set_params({"min": 5, "max": 10})
    assert str(err) == "the length must be between 5 and 10"


def test_missing_placeholder_is_kept() -> None:
    err = new_error("code", "between {min} and {max}").set_params({"min": 1})
    assert str(err) == "between 1 and {max}"


def test_malformed_template_falls_back_to_message(
    caplog: pytest.LogCaptureFixture,
) -> None:
    err = new_error("code", "broken {").set_params({"a": 1})
    with caplog.at_level(logging.WARNING, logger="rulebound.errors"):
        assert str(err) == "broken {"
    assert "Failed to render" in caplog.text


def test_equality_depends_on_code() -> None:
    assert new_error("a", "msg") == new_error("a", "msg")
    assert new_error("a", "msg") != new_error("b", "msg")
    assert ERR_REQUIRED.set_message("x") != ERR_REQUIRED


def test_to_dict() -> None:
    err = new_error("validation_x", "must be {n}").set_params({"n": 3})
    assert err.to_dict() == {
        "code": "validation_x",
        "message": "must be 3",
        "params": {"n": 3},
    }


def test_errors_can_be_raised() -> None:
    with pytest.raises(RuleboundError):
        raise new_error("code", "message")


# -- Errors -------------------------------------------------------------------


def test_errors_string_is_sorted() -> None:
    errs = Errors(
        {"B": ValueError("B1"), "C": ValueError("C1"), "A": ValueError("A1")}
    )
    assert str(errs) == "A: A1; B: B1; C: C1."


def test_errors_string_nested() -> None:
    errs = Errors(
        {
            "H": Errors({"0": ValueError("error xyz"), "1": ValueError("error xyz")}),
            "I": Errors({"foo": ValueError("error xyz")}),
        }
    )
    assert str(errs) == "H: (0: error xyz; 1: error xyz.); I: (foo: error xyz.)."


def test_empty_errors_string() -> None:
    assert str(Errors()) == ""


def test_filter_drops_none_entries() -> None:
    errs = Errors({"B": ValueError("B1"), "C": None, "A": ValueError("A1")})
    filtered = errs.filter()
    assert filtered is errs
    assert "C" not in errs
    assert str(filtered) == "A: A1; B: B1."


def test_filter_all_none_returns_none() -> None:
    assert Errors({"A": None, "B": None}).filter() is None
    assert Errors().filter() is None


def test_errors_to_json() -> None:
    errs = Errors(
        {
            "B": Errors({"2": ValueError("B1")}),
            "A": ValueError("A1"),
            "C": None,
        }
    )
    assert errs.to_json() == '{"A":"A1","B":{"2":"B1"}}'
    assert json.loads(errs.to_json()) == {"A": "A1", "B": {"2": "B1"}}


def test_errors_to_dict_keys_sorted() -> None:
    errs = Errors({"z": ValueError("1"), "a": ValueError("2")})
    assert list(errs.to_dict()) == ["a", "z"]


def test_errors_mapping_protocol() -> None:
    errs = Errors()
    errs["a"] = ERR_REQUIRED
    assert errs["a"] is ERR_REQUIRED
    assert len(errs) == 1
    assert errs == {"a": ERR_REQUIRED}
    del errs["a"]
    assert not errs


def test_errors_are_hashable() -> None:
    errs = Errors({"a": ERR_REQUIRED})
    assert {errs: 1}[errs] == 1


# -- InternalError -------------------------------------------------------------


def test_internal_error_wraps() -> None:
    cause = ValueError("abc")
    err = new_internal_error(cause)
    assert isinstance(err, InternalError)
    assert err.internal_error is cause
    assert str(err) == "abc"
    assert is_internal(err)
    assert not is_internal(cause)
    assert not is_internal(None)


def test_internal_error_to_dict_delegates() -> None:
    err = new_internal_error(FieldSpecError(2))
    assert err.to_dict() == {
        "error": "FIELD_SPEC_INVALID",
        "index": 2,
        "message": "field #2 must be specified as a field name",
    }


def test_internal_error_to_dict_foreign_cause() -> None:
    err = new_internal_error(RuntimeError("boom"))
    assert err.to_dict() == {"error": "InternalError", "message": "boom"}


# -- Structural errors ---------------------------------------------------------


def test_structural_messages() -> None:
    assert str(StructRequiredError()) == "only a struct object can be validated"
    assert str(MapRequiredError()) == "only a map can be validated"
    assert str(FieldSpecError(0)) == "field #0 must be specified as a field name"


def test_field_not_found_suggestions() -> None:
    err = FieldNotFoundError(1, "nmae", ["name", "age", "email"])
    assert str(err) == "field #1 cannot be found in the struct"
    assert "name" in err.suggestions
    data = err.to_dict()
    assert data["error"] == "FIELD_NOT_FOUND"
    assert data["field"] == "nmae"
    assert data["available_fields"] == ["age", "email", "name"]


def test_field_not_found_without_matches() -> None:
    err = FieldNotFoundError(0, "zzzz", ["name"])
    assert err.suggestions == []


def test_validation_error_is_rulebound_error() -> None:
    assert isinstance(ValidationError("c", "m"), RuleboundError)
