"""Tests for format_number.

Plain rendering, exponential thresholds, long-result rounding, and the
error sentinel for non-finite or unparseable input.
"""

import pytest

from tallyup.formatter import format_number
from tallyup.models import ERROR


# --- Plain decimals (5 tests) ---

def test_integer_value_has_no_fraction():
    assert format_number(5) == "5"
    assert format_number(8.0) == "8"


def test_simple_fraction():
    assert format_number(-2.5) == "-2.5"


def test_numeric_string_is_parsed():
    assert format_number("12.50") == "12.5"


def test_negative_zero_prints_zero():
    assert format_number(-0.0) == "0"


def test_small_value_above_threshold_stays_plain():
    """repr(1e-05) is '1e-05' but the display wants a plain decimal."""
    assert format_number(0.00001) == "0.00001"


# --- Exponential notation (4 tests) ---

def test_tiny_value_uses_exponential():
    assert format_number(0.0000001) == "1.000000e-7"


def test_tiny_negative_value_uses_exponential():
    assert format_number(-0.0000001) == "-1.000000e-7"


def test_threshold_upper_bound():
    assert format_number(1e12) == "1.000000e+12"
    assert format_number(123456789012) == "123456789012"


def test_large_value_rounds_mantissa():
    assert format_number(9999989000001) == "9.999989e+12"


# --- Long results (2 tests) ---

def test_float_noise_is_rounded_away():
    assert format_number(0.1 + 0.2) == "0.3"


def test_repeating_fraction_truncated_to_eight_places():
    assert format_number(1 / 3) == "0.33333333"


# --- Error sentinel (3 tests) ---

@pytest.mark.parametrize("value", [ERROR, "Infinity", "-Infinity"])
def test_error_text_propagates(value):
    assert format_number(value) == ERROR


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_is_error(value):
    assert format_number(value) == ERROR


def test_unparseable_string_is_error():
    assert format_number("12abc") == ERROR
