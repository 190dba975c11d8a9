"""Linear, binary and interpolation search with comparison counts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search.

    ``position`` is 1-based, or ``None`` when the key was not found.
    ``comparisons`` counts the iterations the search took.
    """

    position: int | None
    comparisons: int

    @property
    def found(self) -> bool:
        return self.position is not None


def linear_search(items: Sequence[int], key: int) -> SearchResult:
    """Scan ``items`` from the front for ``key``."""
    comparisons = 0
    for position, item in enumerate(items, start=1):
        comparisons += 1
        if item == key:
            return SearchResult(position, comparisons)
    return SearchResult(None, comparisons)


def binary_search(items: Sequence[int], key: int) -> SearchResult:
    """Search ascending ``items`` for ``key`` by halving the range."""
    low, high = 0, len(items) - 1
    comparisons = 0
    while low <= high:
        comparisons += 1
        mid = (low + high) // 2
        if key == items[mid]:
            return SearchResult(mid + 1, comparisons)
        if key > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return SearchResult(None, comparisons)


def interpolation_search(items: Sequence[int], key: int) -> SearchResult:
    """Search ascending ``items`` for ``key`` by estimating its position."""
    low, high = 0, len(items) - 1
    comparisons = 0
    while low <= high:
        comparisons += 1
        spread = items[high] - items[low]
        if spread == 0:
            pos = low
        else:
            pos = low + int((high - low) / spread * (key - items[low]))
        if not low <= pos <= high:
            break
        if key == items[pos]:
            return SearchResult(pos + 1, comparisons)
        if key > items[pos]:
            low = pos + 1
        else:
            high = pos - 1
    return SearchResult(None, comparisons)


def is_sorted(items: Sequence[int]) -> bool:
    """Return True if ``items`` is entirely non-decreasing or entirely decreasing.

    An empty sequence is reported as not sorted.
    """
    pairs = list(zip(items, items[1:]))
    expected = len(items) - 1
    increasing = sum(1 for a, b in pairs if a <= b)
    decreasing = sum(1 for a, b in pairs if a > b)
    return increasing == expected or decreasing == expected