"""Generic equality assertions.

``should_be_equal_to`` compares by value for almost everything. The one
exception is a user-defined iterable type: two such collections are only
"equal" when they are the same instance. Content comparison for those goes
through the sequence assertions (``should_only_contain_in_order`` and
friends).
"""

from __future__ import annotations

import array
import collections.abc
import datetime
import enum
import logging
import numbers
import typing
from typing import Any

import numpy as np

from shouldbe import reporting
from shouldbe.assertions.tolerance import (
    is_single_precision,
    should_be_close_to,
    should_be_close_to_single,
)

logger = logging.getLogger(__name__)

_VALUE_TYPES: tuple[type, ...] = (
    numbers.Number,
    bool,
    type(None),
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    np.generic,
)
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)
_ARRAY_TYPES: tuple[type, ...] = (list, tuple, array.array, np.ndarray)
_PRIMITIVE_ENUMERABLE_MODULES = frozenset(
    {"builtins", "collections", "collections.abc", "_collections_abc"}
)


def _resolve_type(declared_type: Any) -> type | None:
    """Turn ``list[int]`` or ``typing.Sequence[int]`` into its runtime class."""
    if isinstance(declared_type, type):
        return declared_type
    origin = typing.get_origin(declared_type)
    if isinstance(origin, type):
        return origin
    return None


def _is_primitive_enumerable(declared_type: type) -> bool:
    return declared_type.__module__ in _PRIMITIVE_ENUMERABLE_MODULES


def should_check_references(declared_type: Any) -> bool:
    """Decide whether values of ``declared_type`` compare by identity.

    Returns True only for user-defined iterable types. Value-like types,
    text, arrays, non-iterables and the built-in collection shapes all
    compare by value.
    """
    resolved = _resolve_type(declared_type)
    if resolved is None:
        return False

    if issubclass(resolved, _VALUE_TYPES):
        return False

    if issubclass(resolved, _TEXT_TYPES):
        return False

    if issubclass(resolved, _ARRAY_TYPES):
        return False

    if not issubclass(resolved, collections.abc.Iterable):
        return False

    return not _is_primitive_enumerable(resolved)


def should_be_equal_to(
    actual: Any,
    expected: Any,
    message: str = "",
    *,
    rel_tol: float | None = None,
    declared_type: Any = None,
) -> None:
    """Assert ``actual`` equals ``expected``.

    Args:
        actual: Observed value.
        expected: Value it should equal.
        message: Context prefixed to the failure message.
        rel_tol: When given, compare as floating-point numbers within this
            relative tolerance instead.
        declared_type: Type used to choose between identity and value
            comparison. Defaults to the type of ``expected`` (or of
            ``actual`` when ``expected`` is None).
    """
    if rel_tol is not None:
        if is_single_precision(actual, expected):
            should_be_close_to_single(actual, expected, rel_tol, message)
        else:
            should_be_close_to(actual, expected, rel_tol, message)
        return

    if declared_type is None:
        declared_type = type(expected) if expected is not None else type(actual)

    reporter = reporting.get_reporter()
    if should_check_references(declared_type):
        logger.debug(f"Comparing {declared_type!r} instances by identity")
        reporter.report_same(expected, actual, message)
    else:
        reporter.report_equal(expected, actual, message)


def should_not_be_equal_to(actual: Any, expected: Any, message: str = "") -> None:
    """Assert ``actual`` differs from ``expected``.

    Always a value comparison, whatever the type; two distinct collection
    instances with the same contents fail here.
    """
    reporting.get_reporter().report_not_equal(expected, actual, message)
