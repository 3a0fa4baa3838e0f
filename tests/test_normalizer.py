"""Tests for dimension parsing and normalization."""

import pytest

from panel_coder.coding.normalizer import parse_dimension, normalize_dimension


@pytest.mark.parametrize("raw, expected", [
    ("1200", "1200"),
    ("1200.4", "1200"),
    ("1199.6", "1200"),
    ("10.0", "10"),
    ("+7", "7"),
    (".5", "0"),
    ("5.", "5"),
    ("1e3", "1000"),
    ("2.5E1", "25"),
    (" 42 ", "42"),
    ("-0.4", "0"),
])
def test_normalize_rounds_to_integer(raw, expected):
    assert normalize_dimension(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    # half-to-even
    ("0.5", "0"),
    ("1.5", "2"),
    ("2.5", "2"),
    ("3.5", "4"),
    ("-2.5", "-2"),
])
def test_normalize_rounds_half_to_even(raw, expected):
    assert normalize_dimension(raw) == expected


@pytest.mark.parametrize("raw", [
    "", "abc", "10 mm", "1_000", "1,5", "1.2.3", "nan", "inf", "-Infinity",
    # non-ASCII digits and spaces
    "\u0661\u0662\u0660\u0660", "\uff15\uff10\uff10", "\u00a0500",
])
def test_normalize_passes_unparsable_through(raw):
    assert normalize_dimension(raw) == raw


def test_parse_dimension():
    assert parse_dimension("1199.6") == 1199.6
    assert parse_dimension("-3") == -3.0
    assert parse_dimension(None) is None
    assert parse_dimension("1e999") is None
    assert parse_dimension("12,5") is None


def test_parse_dimension_ascii_digits_only():
    assert parse_dimension("\u0661\u0662\u0660\u0660") is None
    assert parse_dimension("\uff15\uff10\uff10") is None
    assert parse_dimension("1200") == 1200.0
