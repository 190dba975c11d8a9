"""Bubble, insertion and heap sort reporting how much work they did."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SortResult:
    """A sorted list together with the sort's comparison count."""

    values: list[int]
    comparisons: int


def improved_bubble_sort(values: Iterable[int]) -> SortResult:
    """Bubble sort that shrinks its bound to the last swap of each pass."""
    items = list(values)
    bound = len(items)
    comparisons = 0
    while True:
        last_swap = 0
        for i in range(bound - 1):
            comparisons += 1
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                last_swap = i
        bound = last_swap + 1
        if last_swap <= 0:
            break
    return SortResult(items, comparisons)


def insertion_sort(values: Iterable[int]) -> SortResult:
    """Insertion sort; the count is the number of elements shifted."""
    items = list(values)
    comparisons = 0
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            comparisons += 1
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return SortResult(items, comparisons)


def heapify(values: list[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the first ``size`` items form a max-heap."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(values: Iterable[int]) -> SortResult:
    """Heap sort; the count is the number of extractions from the heap."""
    items = list(values)
    size = len(items)
    for i in range(size // 2 - 1, -1, -1):
        heapify(items, size, i)
    extractions = 0
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
        extractions += 1
    return SortResult(items, extractions)