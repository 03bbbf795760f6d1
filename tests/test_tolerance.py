"""Tests for relative-tolerance floating-point comparison."""

import math

import numpy as np
import pytest

from shouldbe import ShouldAssertionError
from shouldbe.assertions.tolerance import (
    relative_deviation_within_tolerance,
    should_be_close_to,
    should_be_close_to_single,
)

INF = float("inf")
NAN = float("nan")


# --- relative_deviation_within_tolerance ---


@pytest.mark.parametrize("rel_tol", [0.0, 1e-12, 0.5, 10.0])
def test_nan_equals_nan_for_any_tolerance(rel_tol):
    assert relative_deviation_within_tolerance(NAN, NAN, rel_tol) is True


def test_same_sign_infinities_are_equal():
    assert relative_deviation_within_tolerance(INF, INF, 0.0) is True
    assert relative_deviation_within_tolerance(-INF, -INF, 0.0) is True


def test_opposite_infinities_are_not_equal():
    assert relative_deviation_within_tolerance(INF, -INF, 1e6) is False


@pytest.mark.parametrize("finite", [0.0, 1.0, -3.5, 1e300])
def test_infinity_never_equals_finite(finite):
    assert relative_deviation_within_tolerance(INF, finite, 1e300) is False
    assert relative_deviation_within_tolerance(finite, INF, 1e300) is False


def test_nan_never_equals_number():
    assert relative_deviation_within_tolerance(NAN, 1.0, 1e300) is False
    assert relative_deviation_within_tolerance(1.0, NAN, 1e300) is False


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0.0, 0.0, True),
        (0.0, -0.0, True),
        (0.0, 1e-300, False),
        (5.0, 0.0, False),
    ],
)
def test_zero_magnitude_requires_exact_equality(a, b, expected):
    assert relative_deviation_within_tolerance(a, b, 1e6) is expected


def test_deviation_relative_to_smaller_magnitude():
    # |100 - 110| / 100 = 0.1
    assert relative_deviation_within_tolerance(100.0, 110.0, 0.1) is True
    assert relative_deviation_within_tolerance(110.0, 100.0, 0.1) is True
    assert relative_deviation_within_tolerance(100.0, 110.0, 0.09) is False


def test_boundary_tolerance_equal_to_deviation_passes():
    a, b = 1.0, 1.5
    deviation = abs(a - b) / min(abs(a), abs(b))
    assert relative_deviation_within_tolerance(a, b, deviation) is True
    below = math.nextafter(deviation, 0.0)
    assert relative_deviation_within_tolerance(a, b, below) is False


def test_negative_values_use_magnitudes():
    assert relative_deviation_within_tolerance(-2.0, -2.2, 0.1) is True
    assert relative_deviation_within_tolerance(-2.0, 2.0, 1.0) is False


def test_integers_beyond_float_range_compare_exactly():
    big = 10**400
    assert relative_deviation_within_tolerance(big, big, 0.0) is True
    assert relative_deviation_within_tolerance(big, big + 1, 0.0) is False
    # deviation is 1 / 10**400, far below any practical tolerance
    assert relative_deviation_within_tolerance(big, big + 1, 1e-300) is True
    assert relative_deviation_within_tolerance(0, big, 1e6) is False


def test_integer_boundary_tolerance():
    # |10 - 15| / 10 = 0.5
    assert relative_deviation_within_tolerance(10, 15, 0.5) is True
    assert relative_deviation_within_tolerance(15, 10, math.nextafter(0.5, 0.0)) is False


# --- should_be_close_to ---


def test_close_to_passes_within_tolerance():
    should_be_close_to(0.1 + 0.2, 0.3, 1e-12)


def test_close_to_failure_message():
    with pytest.raises(ShouldAssertionError) as exc_info:
        should_be_close_to(1.0, 2.0, 0.5)
    assert "1.0 and 2.0 are not equal within relative tolerance 0.5." in str(exc_info.value)


def test_close_to_failure_message_with_context():
    with pytest.raises(ShouldAssertionError) as exc_info:
        should_be_close_to(1.0, 2.0, 0.5, "Volume")
    assert str(exc_info.value).startswith(
        "Volume. 1.0 and 2.0 are not equal within relative tolerance 0.5."
    )


def test_close_to_with_huge_integers():
    should_be_close_to(10**400, 10**400, 0.0)
    with pytest.raises(ShouldAssertionError, match="are not equal within relative tolerance"):
        should_be_close_to(10**400, 2 * 10**400, 0.5)


def test_close_to_rejects_negative_tolerance():
    with pytest.raises(ValueError, match="non-negative"):
        should_be_close_to(1.0, 1.0, -0.1)


# --- should_be_close_to_single ---


def test_close_to_single_rounds_to_float32():
    # Equal once both sides are rounded to single precision
    should_be_close_to_single(0.1, float(np.float32(0.1)), 0.0)


def test_close_to_single_message_shows_float32_values():
    with pytest.raises(ShouldAssertionError) as exc_info:
        should_be_close_to_single(np.float32(0.1), np.float32(0.2), 0.01, "Dose")
    assert "Dose. 0.1 and 0.2 are not equal within relative tolerance 0.01." in str(
        exc_info.value
    )


def test_close_to_single_nan_and_infinity():
    should_be_close_to_single(np.float32(NAN), np.float32(NAN), 0.0)
    should_be_close_to_single(np.float32(INF), np.float32(INF), 0.0)
