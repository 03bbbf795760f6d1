"""Ordering assertions using the operands' native comparison operators."""

from __future__ import annotations

from typing import Any

from shouldbe.assertions.basic import should_be_true
from shouldbe.assertions.base import join_message


def should_be_greater_than(actual: Any, expected: Any, message: str = "") -> None:
    should_be_true(
        bool(actual > expected),
        join_message(message, f"Expected {actual!r} to be greater than {expected!r}."),
    )


def should_be_greater_than_or_equal_to(actual: Any, expected: Any, message: str = "") -> None:
    should_be_true(
        bool(actual >= expected),
        join_message(message, f"Expected {actual!r} to be greater than or equal to {expected!r}."),
    )


def should_be_smaller_than(actual: Any, expected: Any, message: str = "") -> None:
    should_be_true(
        bool(actual < expected),
        join_message(message, f"Expected {actual!r} to be smaller than {expected!r}."),
    )


def should_be_smaller_than_or_equal_to(actual: Any, expected: Any, message: str = "") -> None:
    should_be_true(
        bool(actual <= expected),
        join_message(message, f"Expected {actual!r} to be smaller than or equal to {expected!r}."),
    )
