"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A chain of nodes, each holding a value and a link to the next node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_first(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_first(self, value: Any) -> None:
        """Put ``value`` at the head of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the tail of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = new
        self._size += 1

    def insert_after(self, location: int, value: Any) -> None:
        """Insert ``value`` after the node at zero-based index ``location``."""
        if location < 0 or self._head is None:
            raise IndexError("can't insert")
        node = self._head
        for _ in range(location):
            node = node.next
            if node is None:
                raise IndexError("can't insert")
        node.next = _Node(value, node.next)
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the head value."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove and return the tail value."""
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            return self.delete_first()
        previous = self._head
        node = previous.next
        while node.next is not None:
            previous, node = node, node.next
        previous.next = None
        self._size -= 1
        return node.value

    def delete_after(self, location: int) -> Any:
        """Remove and return the node that follows the ``location``-th node.

        Nodes are counted from 1, so the removed node sits at zero-based
        index ``location``; a location of 0 removes the head.
        """
        if location < 0 or self._head is None:
            raise IndexError("can't delete")
        if location == 0:
            return self.delete_first()
        previous: _Node | None = None
        node: _Node | None = self._head
        for _ in range(location):
            previous, node = node, node.next
            if node is None:
                raise IndexError("can't delete")
        previous.next = node.next
        self._size -= 1
        return node.value

    def find(self, value: Any) -> list[int]:
        """Return the one-based locations at which ``value`` is stored."""
        return [
            position
            for position, item in enumerate(self, start=1)
            if item == value
        ]

    def drop_smaller_than_right(self) -> None:
        """Remove every node that has a greater value somewhere to its right."""
        kept: list[_Node] = []
        for node in reversed(list(self._nodes())):
            if not kept or node.value >= kept[-1].value:
                kept.append(node)
        kept.reverse()
        for node, following in zip(kept, kept[1:] + [None]):
            node.next = following
        self._head = kept[0] if kept else None
        self._size = len(kept)