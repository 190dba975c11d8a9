"""Dense integer matrix multiplication and display."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


class DimensionError(ValueError):
    """Raised when matrix shapes do not allow the operation."""


def _shape(matrix: Matrix, name: str) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise DimensionError(f"rows of the {name} matrix differ in length")
    return rows, cols


def multiply(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the product of two rectangular matrices."""
    _, first_cols = _shape(first, "first")
    second_rows, _ = _shape(second, "second")
    if first_cols != second_rows:
        raise DimensionError("the matrices can not be multiplied")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def format_matrix(matrix: Matrix) -> str:
    """Render each value followed by two spaces, one row per line."""
    return "".join(
        "".join(f"{value}  " for value in row) + "\n" for row in matrix
    )