"""A singly linked list of values with search, traversal and in-place update."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class Node:
    """One cell of a linked list: a value and the link to the next cell."""

    data: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def describe_value(value: Any) -> str:
    """Return the line reported when a value is processed during traversal."""
    return f"Processing value: {value}"


def _print_value(value: Any) -> None:
    print(describe_value(value))


class LinkedList:
    """A singly linked list that keeps a tail pointer for constant-time append."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> Node:
        """Add a value at the end of the list and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, value: Any) -> Node:
        """Add a value in front of the current head and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Any) -> bool:
        return self.find(item) is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def find(self, item: Any) -> Optional[Node]:
        """Return the first node holding ``item``, or None if there is none."""
        return next((node for node in self._nodes() if node.data == item), None)

    def traverse(self, process: Callable[[Any], Any] = _print_value) -> None:
        """Call ``process`` on every value from head to tail."""
        for value in self:
            process(value)

    def apply_increase(self, target: Any, percent: float = 5.0) -> Any:
        """Raise the first value equal to ``target`` by ``percent`` percent.

        Returns the updated value; raises LookupError if ``target`` is absent.
        """
        node = self.find(target)
        if node is None:
            raise LookupError(f"{target!r} not found")
        node.data += node.data * (percent / 100)
        return node.data