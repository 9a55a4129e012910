"""Merging two binary search trees into one balanced tree."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def _walk(root: Node | None) -> Iterator[Any]:
    if root is None:
        return
    yield from _walk(root.left)
    yield root.data
    yield from _walk(root.right)


def inorder(root: Node | None) -> list[Any]:
    """Return the values of the tree in in-order sequence."""
    return list(_walk(root))


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences; on ties the value from ``second`` comes first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def sorted_to_bst(values: Sequence[Any]) -> Node | None:
    """Build a height-balanced search tree from ascending ``values``."""

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        mid = (start + end) // 2
        return Node(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def merge_trees(root1: Node | None, root2: Node | None) -> Node | None:
    """Return a balanced search tree holding the values of both trees."""
    return sorted_to_bst(merge_sorted(inorder(root1), inorder(root2)))