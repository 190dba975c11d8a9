"""Bounded array-backed and unbounded linked-list stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CAPACITY = 10


class StackUnderflow(IndexError):
    """Raised when taking from an empty stack."""


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


@dataclass
class _Link:
    value: int
    below: _Link | None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, value: int) -> None:
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflow("stack underflow")
        value = self._top.value
        self._top = self._top.below
        self._size -= 1
        return value

    def peek(self) -> int:
        if self._top is None:
            raise StackUnderflow("stack underflow")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down."""
        link = self._top
        while link is not None:
            yield link.value
            link = link.below