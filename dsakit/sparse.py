"""Sparse matrices held as (row, column, value) triplets."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Triplet:
    """A non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: int

    def transposed(self) -> Triplet:
        return Triplet(self.col, self.row, self.value)


def is_beneficial(rows: int, cols: int, nonzero: int) -> bool:
    """Whether the triplet form (with its header row) is smaller than the dense one."""
    return rows * cols > (nonzero + 1) * 3


def to_triplets(matrix: Sequence[Sequence[int]]) -> list[Triplet]:
    """List the non-zero entries of ``matrix`` in row-major order."""
    return [
        Triplet(r, c, value)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value != 0
    ]


def transpose_triplets(triplets: Iterable[Triplet]) -> list[Triplet]:
    """Swap row and column of every triplet, keeping their order."""
    return [triplet.transposed() for triplet in triplets]


def triplets_to_matrix(
    triplets: Iterable[Triplet], rows: int, cols: int
) -> list[list[int]]:
    """Expand triplets into a dense ``rows`` x ``cols`` matrix."""
    matrix = [[0] * cols for _ in range(rows)]
    for triplet in triplets:
        if not (0 <= triplet.row < rows and 0 <= triplet.col < cols):
            raise IndexError(
                f"entry ({triplet.row}, {triplet.col}) outside a {rows}x{cols} matrix"
            )
        matrix[triplet.row][triplet.col] = triplet.value
    return matrix


def multiply_sparse(
    first: Iterable[Triplet], second: Iterable[Triplet], rows: int, cols: int
) -> list[Triplet]:
    """Multiply two triplet matrices; the result has ``rows`` x ``cols`` bounds.

    Non-zero products are returned in row-major order.
    """
    right = list(second)
    sums: dict[tuple[int, int], int] = defaultdict(int)
    for a in first:
        for b in right:
            if a.col == b.row:
                sums[(a.row, b.col)] += a.value * b.value
    return [
        Triplet(r, c, value)
        for (r, c), value in sorted(sums.items())
        if value != 0 and 0 <= r < rows and 0 <= c < cols
    ]


def format_triplets(triplets: Iterable[Triplet]) -> str:
    """Render triplets as a tab-separated table with a header line."""
    lines = ["Row\tCol\tValue\n"]
    lines.extend(f"{t.row}\t{t.col}\t{t.value}\n" for t in triplets)
    return "".join(lines)