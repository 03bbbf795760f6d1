"""Shared test doubles."""


class Basket:
    """A user-defined collection type."""

    def __init__(self, *items):
        self.items = list(items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other):
        return isinstance(other, Basket) and self.items == other.items

    __hash__ = None

    def __repr__(self):
        return f"Basket{tuple(self.items)!r}"
