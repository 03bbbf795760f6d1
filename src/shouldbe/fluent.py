"""Fluent wrappers: ``should(value).be_equal_to(expected)``."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from shouldbe.assertions import basic, equality, exceptions, ordering, sequences

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class Should(Generic[T]):
    """Wraps a value so assertions read left to right.

    Every method returns the wrapper, so checks can be chained:

        should(items).not_be_empty().contain(3)
    """

    def __init__(self, value: T):
        self.value = value

    def __repr__(self) -> str:
        return f"Should({self.value!r})"

    # --- ordering ---

    def be_greater_than(self, expected: T, message: str = "") -> Should[T]:
        ordering.should_be_greater_than(self.value, expected, message)
        return self

    def be_greater_than_or_equal_to(self, expected: T, message: str = "") -> Should[T]:
        ordering.should_be_greater_than_or_equal_to(self.value, expected, message)
        return self

    def be_smaller_than(self, expected: T, message: str = "") -> Should[T]:
        ordering.should_be_smaller_than(self.value, expected, message)
        return self

    def be_smaller_than_or_equal_to(self, expected: T, message: str = "") -> Should[T]:
        ordering.should_be_smaller_than_or_equal_to(self.value, expected, message)
        return self

    # --- sequences ---

    def only_contain(self, *items_to_find: Any, expected: Any = None) -> Should[T]:
        sequences.should_only_contain(self.value, *items_to_find, expected=expected)
        return self

    def contain(self, *items_to_find: Any) -> Should[T]:
        sequences.should_contain(self.value, *items_to_find)
        return self

    def not_contain(self, *items_to_find: Any) -> Should[T]:
        sequences.should_not_contain(self.value, *items_to_find)
        return self

    def be_empty(self) -> Should[T]:
        sequences.should_be_empty(self.value)
        return self

    def not_be_empty(self) -> Should[T]:
        sequences.should_not_be_empty(self.value)
        return self

    def only_contain_in_order(self, *items_to_find: Any) -> Should[T]:
        sequences.should_only_contain_in_order(self.value, *items_to_find)
        return self

    # --- booleans, null, types ---

    def be_true(self, message: str = "") -> Should[T]:
        basic.should_be_true(self.value, message)
        return self

    def be_false(self, message: str = "") -> Should[T]:
        basic.should_be_false(self.value, message)
        return self

    def be_null(self, message: str = "") -> Should[T]:
        basic.should_be_null(self.value, message)
        return self

    def not_be_null(self, message: str = "") -> Should[T]:
        basic.should_not_be_null(self.value, message)
        return self

    def be_an_instance_of(self, expected_type: type | tuple[type, ...], message: str = "") -> Should[T]:
        basic.should_be_an_instance_of(self.value, expected_type, message)
        return self

    be_a = be_an_instance_of

    # --- equality ---

    def be_equal_to(
        self,
        expected: T,
        message: str = "",
        *,
        rel_tol: float | None = None,
        declared_type: Any = None,
    ) -> Should[T]:
        equality.should_be_equal_to(
            self.value, expected, message, rel_tol=rel_tol, declared_type=declared_type
        )
        return self

    def not_be_equal_to(self, expected: T, message: str = "") -> Should[T]:
        equality.should_not_be_equal_to(self.value, expected, message)
        return self

    # --- exceptions ---

    def throw_an(self, exception_type: type[E], message: str = "") -> E:
        """Call the wrapped action and return the exception it raised."""
        return exceptions.should_throw_an(self.value, exception_type, message)

    throw_a = throw_an
    should_throw_an = throw_an
    should_throw_a = throw_an


def should(value: T) -> Should[T]:
    return Should(value)


class The:
    """Entry point for ``the.action(fn).should_throw_an(SomeError)``."""

    @staticmethod
    def action(action: Callable[[], object]) -> Should[Callable[[], object]]:
        if not callable(action):
            raise TypeError(f"action must be callable, got {action!r}")
        return Should(action)


the = The()
