"""A fixed-capacity stack that reports overflow and underflow."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

DEFAULT_CAPACITY = 5


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, items: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackOverflowError if the stack is full."""
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflowError if empty."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"


def push_all(stack: BoundedStack, items: Iterable[Any]) -> int:
    """Push items in order and return how many were pushed.

    Stops with StackOverflowError at the first item that does not fit; the
    items pushed before it stay on the stack.
    """
    count = 0
    for item in items:
        stack.push(item)
        count += 1
    return count