"""Grid problems solved by breadth- and depth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

EMPTY, FRESH, ROTTEN = 0, 1, 2

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _neighbours(row: int, col: int, rows: int, cols: int):
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def rotting_time(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) is rotten, spreading from rotten ones (2).

    Returns -1 if some fresh orange can never rot. The grid is not modified.
    """
    cells = [list(row) for row in grid]
    if not cells:
        return 0
    rows, cols = len(cells), len(cells[0])
    queue = deque()
    fresh = 0
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value == ROTTEN:
                queue.append((r, c))
            elif value == FRESH:
                fresh += 1
    if fresh == 0:
        return 0

    minutes = 0
    while queue and fresh:
        minutes += 1
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if cells[nr][nc] == FRESH:
                    cells[nr][nc] = ROTTEN
                    fresh -= 1
                    queue.append((nr, nc))
    return -1 if fresh else minutes


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Number of island shapes of 1-cells, identical up to translation."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    shapes: set[tuple[tuple[int, int], ...]] = set()
    for r in range(rows):
        for c in range(cols):
            if visited[r][c] or grid[r][c] != 1:
                continue
            visited[r][c] = True
            stack = [(r, c)]
            cells: list[tuple[int, int]] = []
            while stack:
                cr, cc = stack.pop()
                cells.append((cr - r, cc - c))
                for nr, nc in _neighbours(cr, cc, rows, cols):
                    if not visited[nr][nc] and grid[nr][nc] == 1:
                        visited[nr][nc] = True
                        stack.append((nr, nc))
            shapes.add(tuple(sorted(cells)))
    return len(shapes)