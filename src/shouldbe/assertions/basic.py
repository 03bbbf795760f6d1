"""Boolean, null and instance-of assertions."""

from __future__ import annotations

import types
from typing import Any

import numpy as np

from shouldbe import reporting


def _as_bool(value: bool) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected a bool, got {type(value).__name__}: {value!r}")
    return bool(value)


def should_be_true(value: bool, message: str = "") -> None:
    """Assert ``value`` is True. Truthy non-bool values are rejected."""
    reporting.get_reporter().report_equal(True, _as_bool(value), message)


def should_be_false(value: bool, message: str = "") -> None:
    reporting.get_reporter().report_equal(False, _as_bool(value), message)


def should_be_an_instance_of(obj: Any, expected_type: type | tuple[type, ...], message: str = "") -> None:
    """Assert the run-time type of ``obj`` is, or derives from, ``expected_type``."""
    if not isinstance(expected_type, (type, tuple, types.UnionType)):
        raise TypeError(f"expected_type must be a type, got {expected_type!r}")
    reporting.get_reporter().report_instance_of(expected_type, obj, message)


def should_not_be_null(obj: Any, message: str = "") -> None:
    reporting.get_reporter().report_not_null(obj, message)


def should_be_null(obj: Any, message: str = "") -> None:
    reporting.get_reporter().report_null(obj, message)
