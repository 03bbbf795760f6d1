"""Floating-point equality under a relative tolerance."""

from __future__ import annotations

import logging
import math
import numbers
from fractions import Fraction

import numpy as np

from shouldbe.assertions.base import join_message
from shouldbe.assertions.basic import should_be_true

logger = logging.getLogger(__name__)


def relative_deviation_within_tolerance(value1: float, value2: float, rel_tol: float) -> bool:
    """Return True when ``value1`` and ``value2`` agree within ``rel_tol``.

    The deviation is measured relative to the operand with the smaller
    magnitude. Two NaNs compare equal, as do two infinities of the same
    sign. When the smaller magnitude is zero there is nothing to divide by,
    so only exact equality passes.

    Two integers are compared with exact rational arithmetic, so values
    beyond the float range work. Any other operand must convert to float.
    """
    if isinstance(value1, numbers.Integral) and isinstance(value2, numbers.Integral):
        return _integers_within_tolerance(int(value1), int(value2), rel_tol)

    value1 = float(value1)
    value2 = float(value2)

    if math.isnan(value1) and math.isnan(value2):
        return True

    if math.isinf(value1) and math.isinf(value2) and (value1 > 0) == (value2 > 0):
        return True

    abs_min = min(abs(value1), abs(value2))
    if abs_min == 0:
        return value1 == value2

    deviation = abs(value1 - value2) / abs_min
    return deviation <= rel_tol


def _integers_within_tolerance(value1: int, value2: int, rel_tol: float) -> bool:
    abs_min = min(abs(value1), abs(value2))
    if abs_min == 0:
        return value1 == value2
    return Fraction(abs(value1 - value2), abs_min) <= rel_tol


def _validate_rel_tol(rel_tol: float) -> float:
    rel_tol = float(rel_tol)
    if rel_tol < 0:
        raise ValueError(f"rel_tol must be non-negative, got {rel_tol}")
    return rel_tol


def should_be_close_to(actual: float, expected: float, rel_tol: float, message: str = "") -> None:
    """Assert two doubles are equal within the relative tolerance ``rel_tol``.

    Example:
        should_be_close_to(0.1 + 0.2, 0.3, 1e-9)
    """
    rel_tol = _validate_rel_tol(rel_tol)
    detail = f"{actual} and {expected} are not equal within relative tolerance {rel_tol}."
    within = relative_deviation_within_tolerance(actual, expected, rel_tol)
    logger.debug(f"Tolerance check {actual} vs {expected} (rel_tol={rel_tol}): {within}")
    should_be_true(within, join_message(message, detail))


def should_be_close_to_single(
    actual: float, expected: float, rel_tol: float, message: str = ""
) -> None:
    """Single-precision variant of :func:`should_be_close_to`.

    Both operands are rounded to ``float32`` first, then promoted back to
    double precision for the comparison itself.
    """
    rel_tol = _validate_rel_tol(rel_tol)
    actual32 = np.float32(actual)
    expected32 = np.float32(expected)
    detail = f"{actual32} and {expected32} are not equal within relative tolerance {rel_tol}."
    within = relative_deviation_within_tolerance(float(actual32), float(expected32), rel_tol)
    logger.debug(f"Tolerance check {actual32} vs {expected32} (rel_tol={rel_tol}, float32): {within}")
    should_be_true(within, join_message(message, detail))


def is_single_precision(*values: object) -> bool:
    return any(isinstance(value, np.float32) for value in values)
