"""Grid drills: rotting oranges and distance to the nearest one, both by breadth-first spread."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

EMPTY, FRESH, ROTTEN = 0, 1, 2
IMPOSSIBLE = -1
NO_ONE = -1

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _shape(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def oranges_rotting_brute(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, rescanning the grid each minute; -1 if some never rot."""
    cells = [list(row) for row in grid]
    rows, cols = _shape(cells)
    minutes = 0
    while True:
        newly_rotten = {
            (r, c)
            for i, row in enumerate(cells)
            for j, value in enumerate(row)
            if value == ROTTEN
            for r, c in _neighbours(i, j, rows, cols)
            if cells[r][c] == FRESH
        }
        if not newly_rotten:
            break
        for r, c in newly_rotten:
            cells[r][c] = ROTTEN
        minutes += 1
    if any(FRESH in row for row in cells):
        return IMPOSSIBLE
    return minutes


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left by multi-source BFS; -1 if some never rot."""
    cells = [list(row) for row in grid]
    rows, cols = _shape(cells)
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for i, row in enumerate(cells):
        for j, value in enumerate(row):
            if value == ROTTEN:
                queue.append((i, j))
            elif value == FRESH:
                fresh += 1
    if fresh == 0:
        return 0

    minutes = 0
    while queue:
        rotted = False
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if cells[r][c] == FRESH:
                    cells[r][c] = ROTTEN
                    queue.append((r, c))
                    fresh -= 1
                    rotted = True
        if rotted:
            minutes += 1
    return minutes if fresh == 0 else IMPOSSIBLE


def nearest_one_distance_brute(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return each cell's Manhattan distance to the nearest 1, comparing with every 1; -1 if there is none."""
    rows, cols = _shape(grid)
    ones = [(i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value == 1]
    if not ones:
        return [[NO_ONE] * cols for _ in range(rows)]
    return [
        [min(abs(i - r) + abs(j - c) for r, c in ones) for j in range(cols)]
        for i in range(rows)
    ]


def nearest_one_distance(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return each cell's distance to the nearest 1 by multi-source BFS; -1 if there is none."""
    rows, cols = _shape(grid)
    distance = [[NO_ONE] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 1:
                distance[i][j] = 0
                queue.append((i, j))
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if distance[r][c] == NO_ONE:
                distance[r][c] = distance[row][col] + 1
                queue.append((r, c))
    return distance