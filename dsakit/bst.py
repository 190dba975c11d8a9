"""Unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node holding a value and two optional children."""

    value: int
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go into its right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node created for it."""
        node = Node(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def inorder(self) -> list[int]:
        """Return the values in in-order (ascending) sequence."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        pending: list[Node] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.value
            current = current.right

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)