"""A singly linked list of integers."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One link in the list: its data and the node that follows it."""

    data: int
    next: Node | None = None


class LinkedList:
    """A singly linked list that grows at its head."""

    __slots__ = ("head",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.insert_head(value)

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_head(self, value: int) -> Node:
        """Put a new node holding value in front of the list and return it."""
        self.head = Node(value, self.head)
        return self.head

    def node_at(self, index: int) -> Node:
        """Return the node at index, counting from the head."""
        index = operator.index(index)
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(
            f"Linked list does not contain a value at index {index}"
        )

    def get(self, index: int) -> int:
        """Return the value stored at index."""
        return self.node_at(index).data

    def set(self, index: int, value: int) -> Node:
        """Store value at index and return the node that holds it."""
        node = self.node_at(index)
        node.data = value
        return node

    def describe(self) -> str:
        """Return each node's value and the value of the node after it."""
        lines = []
        for node in self._nodes():
            following = node.next.data if node.next is not None else None
            lines.append(f"Value: {node.data}")
            lines.append(f"Next: {following}")
        return "\n".join(lines) + ("\n" if lines else "")