"""Type predicate and format check tests."""

import math

import pytest

from predcheck.validation.formats import is_address, is_condition_id, is_field_name, is_slug
from predcheck.validation.predicates import (
    is_array,
    is_boolean,
    is_finite_number,
    is_plain_object,
    is_string,
    type_name,
)


def test_finite_number_rejects_bool_nan_and_inf():
    assert is_finite_number(0)
    assert is_finite_number(-1.5)
    assert not is_finite_number(True)
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number("1")


def test_plain_object_excludes_null_and_lists():
    assert is_plain_object({})
    assert not is_plain_object(None)
    assert not is_plain_object([])
    assert is_array([])
    assert not is_array(())


def test_string_and_boolean():
    assert is_string("")
    assert not is_string(b"x")
    assert is_boolean(False)
    assert not is_boolean(0)


@pytest.mark.parametrize(
    "value, name",
    [(None, "null"), (True, "boolean"), (1, "number"), ("x", "string"), ([], "array"), ({}, "object")],
)
def test_type_name(value, name):
    assert type_name(value) == name


def test_address_and_condition_id_formats():
    assert is_address("0x" + "aB" * 20)
    assert not is_address("0x" + "a" * 39)
    assert not is_address("1x" + "a" * 40)
    assert is_condition_id("0x" + "f" * 64)
    assert not is_condition_id("0x" + "f" * 40)


def test_slug_and_field_name():
    assert is_slug("rain-event_2026")
    assert not is_slug("rain event")
    assert is_field_name("createdAt")
    assert not is_field_name("1st")
