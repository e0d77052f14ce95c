"""Проверки валидаторов настроек."""

from __future__ import annotations

import re

from container_meta.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
)


def test_type_validator_success() -> None:
    validator = TypeValidator(int)
    assert validator.validate(5) == (True, "")


def test_type_validator_failure() -> None:
    validator = TypeValidator(str)
    is_valid, error = validator.validate(123)
    assert not is_valid
    assert "str" in error


def test_type_validator_rejects_bool_for_numbers() -> None:
    assert TypeValidator(int).validate(True) == (True, "")
    is_valid, error = TypeValidator(int, allow_bool=False).validate(True)
    assert not is_valid
    assert "bool" in error


def test_range_validator_out_of_bounds() -> None:
    validator = RangeValidator(1, 10)
    assert validator.validate(5) == (True, "")
    is_valid, error = validator.validate(11)
    assert not is_valid
    assert "out of range" in error


def test_range_validator_incomparable_value() -> None:
    is_valid, error = RangeValidator(0, 10).validate("5")
    assert not is_valid
    assert "not comparable" in error


def test_enum_validator() -> None:
    validator = EnumValidator(["cli", "sdk"])
    assert validator.validate("cli") == (True, "")
    is_valid, error = validator.validate("lxc")
    assert not is_valid
    assert "allowed values" in error


def test_regex_validator_failure_when_not_string() -> None:
    validator = RegexValidator(r"^[A-Z]+$")
    is_valid, error = validator.validate(123)
    assert not is_valid
    assert "string" in error


def test_regex_validator_failure_pattern() -> None:
    validator = RegexValidator(r"^[A-Z]+$")
    is_valid, error = validator.validate("abc")
    assert not is_valid
    assert "does not match" in error


def test_composite_validator_stops_on_first_error() -> None:
    validator = CompositeValidator([TypeValidator(int), RangeValidator(0, 10)])
    is_valid, error = validator.validate("not int")
    assert not is_valid
    assert "Expected int" in error


def test_regex_validator_supports_compiled_pattern() -> None:
    pattern = re.compile(r"^[0-9]+$")
    validator = RegexValidator(pattern)
    assert validator.validate("1234") == (True, "")
