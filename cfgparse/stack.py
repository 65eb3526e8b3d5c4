"""The stack of tokens consumed by the parser."""

from dataclasses import dataclass


@dataclass
class ParsedData:
    """One consumed piece of input: its code, its text and its length."""

    code: int
    text: str | None
    length: int


class DataStack:
    """A last-in, first-out store of :class:`ParsedData` entries."""

    def __init__(self):
        self._items: list[ParsedData] = []

    def push(self, data):
        """Put ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self):
        """Remove and return the top entry; ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from an empty data stack")
        return self._items.pop()

    def peek(self):
        """Return the top entry without removing it; ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("peek into an empty data stack")
        return self._items[-1]

    def clear(self):
        """Remove every entry."""
        self._items.clear()

    def __len__(self):
        return len(self._items)