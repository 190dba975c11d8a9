"""Singly linked list of integers with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError("invalid position")

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError("empty list, nothing to delete")

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: int) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            *_, last = self._nodes()
            last.next = node
        self._size += 1

    def insert_at_position(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("invalid position")
        if position == 1:
            self.insert_at_beginning(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at_beginning(self) -> int:
        """Remove the head and return its value."""
        self._require_items()
        assert self._head is not None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_at_end(self) -> int:
        """Remove the last node and return its value."""
        self._require_items()
        if self._size == 1:
            return self.delete_at_beginning()
        previous = self._node_at(self._size - 1)
        assert previous.next is not None
        value = previous.next.value
        previous.next = None
        self._size -= 1
        return value

    def delete_at_position(self, position: int) -> int:
        """Remove the node at ``position`` and return its value."""
        self._require_items()
        if not 1 <= position <= self._size:
            raise IndexError("invalid position")
        if position == 1:
            return self.delete_at_beginning()
        previous = self._node_at(position - 1)
        assert previous.next is not None
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def delete_by_value(self, key: int) -> int:
        """Remove the first node holding ``key`` and return its value."""
        if self._head is None:
            raise IndexError("empty list")
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return node.value
            previous = node
        raise ValueError(f"element {key} not found")

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: _Node | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"