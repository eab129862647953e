"""Matrix drills: spiral traversal, zeroing rows and columns, and rotation."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _require_rows(matrix: Sequence[Sequence[int]]) -> None:
    if not matrix:
        raise ValueError("matrix must have at least one row")


def spiral_order_brute(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Walk the matrix clockwise, turning whenever the next cell is outside or already seen."""
    _require_rows(matrix)
    rows, cols = len(matrix), len(matrix[0])
    visited: set[tuple[int, int]] = set()
    result: list[int] = []
    direction = row = col = 0
    for _ in range(rows * cols):
        result.append(matrix[row][col])
        visited.add((row, col))
        d_row, d_col = _DIRECTIONS[direction]
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < rows and 0 <= next_col < cols) or (next_row, next_col) in visited:
            direction = (direction + 1) % 4
            d_row, d_col = _DIRECTIONS[direction]
            next_row, next_col = row + d_row, col + d_col
        row, col = next_row, next_col
    return result


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in clockwise spiral order by shrinking four boundaries."""
    _require_rows(matrix)
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
        bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
        left += 1
    return result


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy in which every row and column holding a zero is filled with zeros."""
    _require_rows(matrix)
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated a quarter turn clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(matrix))]