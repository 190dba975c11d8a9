import random

import pytest

from dsakit.sorting import heap_sort, heapify, improved_bubble_sort, insertion_sort

A = [10, 34, 5, 96, 67]
B = [10, 20, 30, 40, 50]
C = [50, 40, 30, 20, 10]


def _inversions(values):
    return sum(
        1
        for i, a in enumerate(values)
        for b in values[i + 1:]
        if a > b
    )


@pytest.mark.parametrize("data", [A, B, C, [], [7], [3, 3, 1, 3]])
def test_sorts_produce_sorted_output(data):
    expected = sorted(data)
    assert improved_bubble_sort(data).values == expected
    assert insertion_sort(data).values == expected
    assert heap_sort(data).values == expected


def test_sorts_leave_input_untouched():
    data = list(A)
    improved_bubble_sort(data)
    assert data == A
    insertion_sort(data)
    assert data == A
    heap_sort(data)
    assert data == A


def test_random_data():
    rng = random.Random(99)
    data = [rng.randint(-50, 50) for _ in range(100)]
    expected = sorted(data)
    assert improved_bubble_sort(data).values == expected
    assert insertion_sort(data).values == expected
    assert heap_sort(data).values == expected


def test_bubble_sort_on_sorted_input_makes_one_pass():
    assert improved_bubble_sort(B).comparisons == len(B) - 1


def test_bubble_sort_reversed_input_is_quadratic():
    n = len(C)
    assert improved_bubble_sort(C).comparisons == n * (n - 1) // 2


@pytest.mark.parametrize("data", [A, B, C, [4, 1, 3, 1, 2]])
def test_insertion_sort_counts_inversions(data):
    assert insertion_sort(data).comparisons == _inversions(data)


@pytest.mark.parametrize("data", [A, B, C, [1], []])
def test_heap_sort_counts_extractions(data):
    assert heap_sort(data).comparisons == max(len(data) - 1, 0)


def test_heapify_builds_max_heap_root():
    data = [1, 9, 8, 3, 4]
    heapify(data, len(data), 0)
    assert data[0] == max(data)
    assert sorted(data) == sorted([1, 9, 8, 3, 4])


def test_heapify_respects_size():
    data = [1, 2, 99]
    heapify(data, 2, 0)
    assert data[2] == 99
    assert data[0] == 2