"""Tests for number/display-string conversion."""

import math

import pytest

from deskcalc.formatting import format_display, number_to_string, to_exponential, to_number


# --- to_number (3 tests) ---

def test_to_number_parses_entries():
    assert to_number("12") == 12
    assert to_number("0.") == 0
    assert to_number("3.25") == 3.25


def test_to_number_error_is_nan():
    assert math.isnan(to_number("Error"))


def test_to_number_round_trips_canonical_strings():
    assert to_number("1e+21") == 1e21
    assert math.isinf(to_number("Infinity"))


# --- number_to_string (1 parametrized test) ---

@pytest.mark.parametrize("value, expected", [
    (7.0, "7"),
    (-3.0, "-3"),
    (-0.0, "0"),
    (0.1 + 0.2, "0.30000000000000004"),
    (0.25, "0.25"),
    (123.456, "123.456"),
    (1e16, "10000000000000000"),
    (1e21, "1e+21"),
    (1.5e22, "1.5e+22"),
    (0.000001, "0.000001"),
    (1.5e-7, "1.5e-7"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
    (math.nan, "NaN"),
])
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected


# --- to_exponential (6 tests) ---

def test_to_exponential_has_eight_fraction_digits():
    assert to_exponential(123456789012345678.0) == "1.23456789e+17"


def test_to_exponential_negative_exponent_unpadded():
    assert to_exponential(0.000000000000000012345) == "1.23450000e-17"


def test_to_exponential_ties_round_away_from_zero():
    """12345678850000000 is exactly representable, so the 9th digit is a true tie."""
    assert to_exponential(12345678850000000.0) == "1.23456789e+16"
    assert to_exponential(-12345678850000000.0) == "-1.23456789e+16"
    assert to_exponential(2.5, 0) == "3e+0"


def test_to_exponential_carry_bumps_exponent():
    assert to_exponential(9.999999999) == "1.00000000e+1"
    assert to_exponential(99999999999999999.0) == "1.00000000e+17"


def test_to_exponential_zero():
    assert to_exponential(0.0) == "0.00000000e+0"
    assert to_exponential(-0.0, 2) == "0.00e+0"


def test_to_exponential_without_fraction_digits():
    assert to_exponential(123456.0, 0) == "1e+5"


# --- format_display (5 tests) ---

def test_short_values_unchanged():
    assert format_display("0.") == "0."
    assert format_display("1234567890123456") == "1234567890123456"


def test_long_values_become_exponential():
    assert format_display("12345678901234567") == "1.23456789e+16"


def test_long_fraction_becomes_exponential():
    assert format_display("0.30000000000000004") == "3.00000000e-1"


def test_non_finite_renders_error():
    assert format_display("Infinity") == "Error"
    assert format_display("NaN") == "Error"
    assert format_display("Error") == "Error"


def test_custom_width_and_digits():
    assert format_display("123456", width=4, fraction_digits=2) == "1.23e+5"
