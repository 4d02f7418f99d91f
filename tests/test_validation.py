"""Tests for the field constraint engine."""

import math

import pytest
from pydantic import ValidationError

from projectboard.core.validation import Validatable, failed_constraints, validate


@pytest.mark.parametrize(
    "field, expected",
    [
        (Validatable(value="", required=True), False),
        (Validatable(value="   ", required=True), False),
        (Validatable(value="hi", required=True, min_length=5), False),
        (Validatable(value=3, required=True, min=1, max=5), True),
        (Validatable(value="ok", required=False), True),
        (Validatable(value=""), True),
        (Validatable(value="hello", required=True, min_length=5), True),
        (Validatable(value="too long", max_length=3), False),
        (Validatable(value=0, required=True, min=1), False),
        (Validatable(value=6, max=5), False),
        (Validatable(value=5, min=1, max=5), True),
        (Validatable(value=2.5, min=1, max=5), True),
    ],
)
def test_validate_table(field, expected):
    assert validate(field) is expected


def test_numeric_bounds_do_not_apply_to_text():
    """A text value is never checked against min/max."""
    assert validate(Validatable(value="a", min=10, max=20)) is True


def test_length_bounds_do_not_apply_to_numbers():
    """A numeric value is never checked against min_length/max_length."""
    assert validate(Validatable(value=1234567, min_length=10, max_length=2)) is True


def test_required_number_zero_is_present():
    """Zero renders as "0", which is not empty."""
    assert validate(Validatable(value=0, required=True)) is True


def test_nan_fails_both_bounds():
    field = Validatable(value=math.nan, required=True, min=1, max=5)

    assert failed_constraints(field) == ["min", "max"]
    assert validate(field) is False


def test_failed_constraints_lists_every_failure():
    field = Validatable(value=" ", required=True, min_length=5)

    assert failed_constraints(field) == ["required", "min_length"]


def test_failed_constraints_empty_when_valid():
    assert failed_constraints(Validatable(value="Build API", required=True)) == []


def test_validatable_is_immutable():
    field = Validatable(value="x")

    with pytest.raises(ValidationError):
        field.value = "y"
