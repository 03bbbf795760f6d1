"""Sequence containment, emptiness and ordering assertions.

Every function materializes ``items`` once with ``list(...)``, so generators
and other one-shot iterables are fine to pass in.
"""

from __future__ import annotations

from typing import Any, Iterable

from shouldbe.assertions.basic import should_be_false, should_be_true
from shouldbe.assertions.equality import should_be_equal_to, should_not_be_equal_to


def should_only_contain(
    items: Iterable[Any], *items_to_find: Any, expected: Iterable[Any] | None = None
) -> None:
    """Assert ``items`` holds exactly the expected elements, in any order.

    The counts must match and each expected element must be present.
    Duplicates are not checked beyond the count. The expected elements are
    given either as positional arguments or as one iterable via
    ``expected=``, never both.
    """
    if expected is not None:
        if items_to_find:
            raise TypeError("Pass expected items positionally or via expected=, not both")
        items_to_find = tuple(expected)
    results = list(items)
    wanted = list(items_to_find)
    should_be_equal_to(
        len(results), len(wanted), f"Expected {len(wanted)} item(s) in {results!r}"
    )
    for item in wanted:
        should_be_true(item in results, f"Expected {item!r} to be in {results!r}")


def should_contain(items: Iterable[Any], *items_to_find: Any) -> None:
    """Assert every expected element is in ``items``; extras are allowed."""
    results = list(items)
    for item in items_to_find:
        should_be_true(item in results, f"Expected {item!r} to be in {results!r}")


def should_not_contain(items: Iterable[Any], *items_to_find: Any) -> None:
    results = list(items)
    for item in items_to_find:
        should_be_false(item in results, f"Expected {item!r} not to be in {results!r}")


def should_be_empty(items: Iterable[Any]) -> None:
    results = list(items)
    should_be_equal_to(len(results), 0, f"Expected no items but found {results!r}")


def should_not_be_empty(items: Iterable[Any]) -> None:
    should_not_be_equal_to(len(list(items)), 0, "Expected at least one item")


def should_only_contain_in_order(items: Iterable[Any], *items_to_find: Any) -> None:
    """Assert ``items`` equals the expected elements position by position."""
    results = list(items)
    expected = list(items_to_find)
    should_be_equal_to(
        len(results), len(expected), f"Expected {len(expected)} item(s) in {results!r}"
    )
    for index, (actual, wanted) in enumerate(zip(results, expected)):
        should_be_equal_to(actual, wanted, f"Item at index {index} differs")
