"""Reporting primitives that signal pass/fail to the host test framework."""

from __future__ import annotations

import logging
import unittest
from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

from shouldbe.assertions.base import AssertionResult, ShouldAssertionError

logger = logging.getLogger(__name__)


def _with_detail(message: str, detail: str) -> str:
    # The generated detail goes on its own line below the caller's message
    if message:
        return f"{message}\n{detail}"
    return detail


def values_equal(expected: Any, actual: Any) -> bool:
    """Structural equality that also copes with numpy arrays."""
    if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
        return bool(np.array_equal(expected, actual))
    return bool(expected == actual)


class Reporter:
    """Base reporter.

    Each ``report_*`` method checks one relation and hands a failed
    :class:`AssertionResult` to :meth:`fail`. Subclasses only need to
    implement :meth:`fail`, but may override individual primitives to
    delegate to a framework's own assertion methods.
    """

    def fail(self, result: AssertionResult) -> None:
        raise NotImplementedError

    def _check(self, name: str, passed: bool, message: str) -> None:
        if passed:
            return
        logger.debug(f"Assertion {name} failed: {message}")
        self.fail(AssertionResult(name=name, passed=False, message=message))

    def report_equal(self, expected: Any, actual: Any, message: str = "") -> None:
        detail = f"Expected {expected!r} but was {actual!r}."
        self._check("equal", values_equal(expected, actual), _with_detail(message, detail))

    def report_same(self, expected: Any, actual: Any, message: str = "") -> None:
        detail = f"Expected the same instance as {expected!r} but was {actual!r}."
        self._check("same", actual is expected, _with_detail(message, detail))

    def report_not_equal(self, expected: Any, actual: Any, message: str = "") -> None:
        detail = f"Expected a value not equal to {expected!r} but was {actual!r}."
        self._check(
            "not_equal", not values_equal(expected, actual), _with_detail(message, detail)
        )

    def report_instance_of(self, expected_type: Any, obj: Any, message: str = "") -> None:
        detail = f"Expected an instance of {expected_type!r} but was {type(obj)!r}."
        self._check(
            "instance_of", isinstance(obj, expected_type), _with_detail(message, detail)
        )

    def report_not_null(self, obj: Any, message: str = "") -> None:
        detail = "Expected not null but was null."
        self._check("not_null", obj is not None, _with_detail(message, detail))

    def report_null(self, obj: Any, message: str = "") -> None:
        detail = f"Expected null but was {obj!r}."
        self._check("null", obj is None, _with_detail(message, detail))


class AssertionReporter(Reporter):
    """Raises :class:`ShouldAssertionError`, which any test runner treats as a failure."""

    def fail(self, result: AssertionResult) -> None:
        raise ShouldAssertionError(result)


class PytestReporter(Reporter):
    """Fails the current test through ``pytest.fail`` without a traceback."""

    def fail(self, result: AssertionResult) -> None:
        import pytest

        pytest.fail(result.message, pytrace=False)


class UnittestReporter(Reporter):
    """Delegates every primitive to a ``unittest.TestCase`` instance."""

    def __init__(self, test_case: unittest.TestCase):
        self.test_case = test_case

    def fail(self, result: AssertionResult) -> None:
        self.test_case.fail(result.message)

    def report_equal(self, expected: Any, actual: Any, message: str = "") -> None:
        if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
            super().report_equal(expected, actual, message)
            return
        self.test_case.assertEqual(expected, actual, message or None)

    def report_same(self, expected: Any, actual: Any, message: str = "") -> None:
        self.test_case.assertIs(actual, expected, message or None)

    def report_not_equal(self, expected: Any, actual: Any, message: str = "") -> None:
        if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
            super().report_not_equal(expected, actual, message)
            return
        self.test_case.assertNotEqual(expected, actual, message or None)

    def report_instance_of(self, expected_type: Any, obj: Any, message: str = "") -> None:
        self.test_case.assertIsInstance(obj, expected_type, message or None)

    def report_not_null(self, obj: Any, message: str = "") -> None:
        self.test_case.assertIsNotNone(obj, message or "Expected not null but was null.")

    def report_null(self, obj: Any, message: str = "") -> None:
        self.test_case.assertIsNone(obj, message or None)


_active_reporter: Reporter = AssertionReporter()


def get_reporter() -> Reporter:
    return _active_reporter


def set_reporter(reporter: Reporter) -> Reporter:
    """Install ``reporter`` process-wide and return the one it replaces."""
    global _active_reporter
    if not isinstance(reporter, Reporter):
        raise TypeError(f"Expected a Reporter, got {type(reporter).__name__}")
    previous = _active_reporter
    _active_reporter = reporter
    logger.debug(f"Active reporter set to {type(reporter).__name__}")
    return previous


@contextmanager
def use_reporter(reporter: Reporter) -> Iterator[Reporter]:
    """Temporarily route assertion failures through ``reporter``."""
    previous = set_reporter(reporter)
    try:
        yield reporter
    finally:
        set_reporter(previous)
