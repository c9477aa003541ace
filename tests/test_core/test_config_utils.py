"""Tests for typed configuration readers."""

import pytest

from ingest_attachment.config_utils import (
    check_no_unknown_properties,
    read_optional_int,
    read_optional_list,
    read_optional_string,
    read_required_string,
    type_name,
)
from ingest_attachment.exceptions import (
    ConfigurationError,
    InvalidPropertyValueError,
    MissingRequiredFieldError,
    TypeMismatchError,
)


class Custom:
    pass


class TestTypeName:

    @pytest.mark.parametrize(
        "value, expected",
        [("x", "builtins.str"), (1, "builtins.int"), ({}, "builtins.dict"), (None, "builtins.NoneType")],
    )
    def test_builtin_types(self, value, expected):
        assert type_name(value) == expected

    def test_user_type(self):
        assert type_name(Custom()) == f"{__name__}.Custom"


class TestReaders:

    def test_read_required_string_pops_key(self):
        config = {"name": "value", "other": 1}

        assert read_required_string("proc", None, config, "name") == "value"
        assert config == {"other": 1}

    def test_read_required_string_missing(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            read_required_string("proc", "tag1", {}, "name")

        error = exc_info.value
        assert str(error) == "[name] required property is missing"
        assert error.processor_type == "proc"
        assert error.processor_tag == "tag1"
        assert error.property_name == "name"

    def test_read_required_string_wrong_type_still_consumed(self):
        config = {"name": 1.0}

        with pytest.raises(MissingRequiredFieldError, match=r"got \[builtins.float\]"):
            read_required_string("proc", None, config, "name")
        assert config == {}

    def test_read_optional_string_default(self):
        assert read_optional_string("proc", None, {}, "name", "fallback") == "fallback"
        assert read_optional_string("proc", None, {}, "name") is None

    def test_read_optional_string_wrong_type(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            read_optional_string("proc", None, {"name": {"a": 1}}, "name")
        assert exc_info.value.expected_type == "str"
        assert exc_info.value.actual_type == "builtins.dict"

    def test_read_optional_int(self):
        assert read_optional_int("proc", None, {"n": 7}, "n", 3) == 7
        assert read_optional_int("proc", None, {}, "n", 3) == 3
        assert read_optional_int("proc", None, {"n": -7}, "n") == -7

    def test_read_optional_int_positive(self):
        with pytest.raises(InvalidPropertyValueError) as exc_info:
            read_optional_int("proc", None, {"n": 0}, "n", positive=True)
        assert exc_info.value.value == 0

    def test_read_optional_int_rejects_bool(self):
        with pytest.raises(TypeMismatchError, match=r"\[n\] property isn't of type \[int\], got \[builtins.bool\]"):
            read_optional_int("proc", None, {"n": False}, "n")

    def test_read_optional_list(self):
        assert read_optional_list("proc", None, {"l": ["a"]}, "l") == ["a"]
        assert read_optional_list("proc", None, {"l": ("a", "b")}, "l") == ["a", "b"]
        assert read_optional_list("proc", None, {}, "l") is None

    @pytest.mark.parametrize("value, type_label", [("a", "builtins.str"), ({"a": 1}, "builtins.dict"), (3, "builtins.int")])
    def test_read_optional_list_wrong_type(self, value, type_label):
        with pytest.raises(TypeMismatchError) as exc_info:
            read_optional_list("proc", None, {"l": value}, "l")
        assert str(exc_info.value) == f"[l] property isn't a list, but of type [{type_label}]"


class TestUnknownProperties:

    def test_no_leftovers(self):
        check_no_unknown_properties("attachment", None, {})

    def test_leftovers_are_reported_sorted(self):
        with pytest.raises(ConfigurationError) as exc_info:
            check_no_unknown_properties("attachment", "t", {"zeta": 1, "alpha": 2})

        assert str(exc_info.value) == (
            "processor [attachment] doesn't support one or more provided configuration parameters [alpha, zeta]"
        )
        assert exc_info.value.property_name is None
