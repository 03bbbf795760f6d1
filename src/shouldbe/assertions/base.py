"""Base data structures for the assertion system."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single assertion.

    Attributes:
        name: Identifier for the assertion (e.g. "equal", "instance_of").
        passed: Whether the checked relation held.
        message: Human-readable detail about the result, including any
            caller-supplied context message.
    """

    name: str
    passed: bool
    message: str


class ShouldAssertionError(AssertionError):
    """Raised when an assertion fails under the default reporter."""

    def __init__(self, result: AssertionResult):
        super().__init__(result.message)
        self.result = result


def join_message(context: str | None, detail: str) -> str:
    """Prefix a generated detail message with the caller's context, if any."""
    if context:
        return f"{context}. {detail}"
    return detail
