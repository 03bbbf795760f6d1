"""Assertions on exceptions raised by a deferred action."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from shouldbe.assertions.basic import should_be_an_instance_of, should_not_be_null

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


def _exception_from_performing(action: Callable[[], object]) -> Exception | None:
    try:
        action()
    except Exception as e:
        logger.debug(f"Captured {type(e).__name__} from {action!r}: {e}")
        return e
    return None


def should_throw_an(
    action: Callable[[], object], exception_type: type[E], message: str = ""
) -> E:
    """Assert that calling ``action`` raises ``exception_type`` (or a subclass).

    The action is called once. Only the first exception is captured; the
    assertion fails when nothing is raised or when the exception is of an
    unrelated type. Returns the captured exception for further checks.

    Example:
        error = should_throw_an(lambda: int("x"), ValueError)
        should_be_true("invalid literal" in str(error))
    """
    if not callable(action):
        raise TypeError(f"action must be callable, got {action!r}")
    resulting_exception = _exception_from_performing(action)
    should_not_be_null(resulting_exception, message)
    should_be_an_instance_of(resulting_exception, exception_type, message)
    return resulting_exception  # type: ignore[return-value]


should_throw_a = should_throw_an
