"""Should-style assertion helpers."""

from shouldbe.assertions.base import AssertionResult, ShouldAssertionError
from shouldbe.assertions.basic import (
    should_be_an_instance_of,
    should_be_false,
    should_be_null,
    should_be_true,
    should_not_be_null,
)
from shouldbe.assertions.equality import (
    should_be_equal_to,
    should_check_references,
    should_not_be_equal_to,
)
from shouldbe.assertions.exceptions import should_throw_a, should_throw_an
from shouldbe.assertions.ordering import (
    should_be_greater_than,
    should_be_greater_than_or_equal_to,
    should_be_smaller_than,
    should_be_smaller_than_or_equal_to,
)
from shouldbe.assertions.sequences import (
    should_be_empty,
    should_contain,
    should_not_be_empty,
    should_not_contain,
    should_only_contain,
    should_only_contain_in_order,
)
from shouldbe.assertions.tolerance import (
    relative_deviation_within_tolerance,
    should_be_close_to,
    should_be_close_to_single,
)

__all__ = [
    "AssertionResult",
    "ShouldAssertionError",
    "relative_deviation_within_tolerance",
    "should_be_an_instance_of",
    "should_be_close_to",
    "should_be_close_to_single",
    "should_be_empty",
    "should_be_equal_to",
    "should_be_false",
    "should_be_greater_than",
    "should_be_greater_than_or_equal_to",
    "should_be_null",
    "should_be_smaller_than",
    "should_be_smaller_than_or_equal_to",
    "should_be_true",
    "should_check_references",
    "should_contain",
    "should_not_be_empty",
    "should_not_be_equal_to",
    "should_not_be_null",
    "should_not_contain",
    "should_only_contain",
    "should_only_contain_in_order",
    "should_throw_a",
    "should_throw_an",
]
