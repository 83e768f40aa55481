"""Tests for property value validation against declared datatypes."""

import pytest

from atlas.models.enums import ComputeResourcePropertyDataType as DataType


@pytest.mark.parametrize("value", ["0", "42", "-7", "+13", "007"])
def test_integer_accepts_signed_digits(value):
    assert DataType.INTEGER.is_valid(value)


@pytest.mark.parametrize("value", ["", "1.5", "1e3", "abc", " 4", "--1"])
def test_integer_rejects_non_integers(value):
    assert not DataType.INTEGER.is_valid(value)


@pytest.mark.parametrize("value", ["1", "1.5", "-0.25", ".5", "3.", "6.02e23", "1E-9"])
def test_float_accepts_decimal_and_scientific(value):
    assert DataType.FLOAT.is_valid(value)


@pytest.mark.parametrize("value", ["Hallo Welt", "", "1.2.3", "e5", "NaN-ish"])
def test_float_rejects_garbage(value):
    assert not DataType.FLOAT.is_valid(value)


def test_string_accepts_anything_but_none():
    assert DataType.STRING.is_valid("Hallo Welt")
    assert DataType.STRING.is_valid("")
    assert not DataType.STRING.is_valid(None)


def test_none_is_never_valid():
    assert not DataType.INTEGER.is_valid(None)
    assert not DataType.FLOAT.is_valid(None)
