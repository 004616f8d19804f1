"""Dynamic programming over grids: path counts, path sums and cherry pickup."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import cache

OBSTACLE = -1

Grid = Sequence[Sequence[int]]


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    return len(grid), len(grid[0])


def _check_size(n: int, m: int) -> None:
    if n <= 0 or m <= 0:
        raise ValueError("grid dimensions must be positive")


def _collect(grid: Grid, row: int, a: int, b: int) -> int:
    return grid[row][a] + (grid[row][b] if a != b else 0)


def cherry_pickup(grid: Grid) -> int:
    """Most cherries two robots collect walking down from the top corners (memoised)."""
    rows, cols = _dimensions(grid)

    @cache
    def best(row: int, a: int, b: int) -> int:
        here = _collect(grid, row, a, b)
        if row == rows - 1:
            return here
        return here + max(
            best(row + 1, na, nb)
            for na in (a - 1, a, a + 1)
            if 0 <= na < cols
            for nb in (b - 1, b, b + 1)
            if 0 <= nb < cols
        )

    return best(0, 0, cols - 1)


def cherry_pickup_tabulated(grid: Grid) -> int:
    """Most cherries two robots collect walking down from the top corners (bottom-up)."""
    rows, cols = _dimensions(grid)
    unreachable = -math.inf
    prev = [[unreachable] * cols for _ in range(cols)]
    prev[0][cols - 1] = _collect(grid, 0, 0, cols - 1)
    for row in range(1, rows):
        cur = [[unreachable] * cols for _ in range(cols)]
        for a in range(cols):
            for b in range(cols):
                came_from = max(
                    prev[pa][pb]
                    for pa in (a - 1, a, a + 1)
                    if 0 <= pa < cols
                    for pb in (b - 1, b, b + 1)
                    if 0 <= pb < cols
                )
                if came_from != unreachable:
                    cur[a][b] = came_from + _collect(grid, row, a, b)
        prev = cur
    return int(max(max(states) for states in prev))


def min_path_sum(grid: Grid) -> int:
    """Smallest sum along a right/down path from top-left to bottom-right (memoised)."""
    rows, cols = _dimensions(grid)

    @cache
    def best(r: int, c: int) -> int:
        if r == 0 and c == 0:
            return grid[0][0]
        options = []
        if c > 0:
            options.append(best(r, c - 1))
        if r > 0:
            options.append(best(r - 1, c))
        return grid[r][c] + min(options)

    return best(rows - 1, cols - 1)


def min_path_sum_tabulated(grid: Grid) -> int:
    """Smallest sum along a right/down path from top-left to bottom-right (bottom-up)."""
    rows, cols = _dimensions(grid)
    dp = [[0] * cols for _ in range(rows)]
    for r in range(rows):
        for c in range(cols):
            if r == 0 and c == 0:
                dp[r][c] = grid[r][c]
                continue
            left = dp[r][c - 1] if c > 0 else math.inf
            top = dp[r - 1][c] if r > 0 else math.inf
            dp[r][c] = grid[r][c] + min(left, top)
    return dp[rows - 1][cols - 1]


def _next_triangle_row(row: Sequence[int], prev: Sequence[int]) -> list[int]:
    i = len(prev)
    middle = [row[j] + min(prev[j], prev[j - 1]) for j in range(1, i)]
    return [row[0] + prev[0], *middle, row[i] + prev[i - 1]]


def triangle_min_path_sum(triangle: Grid) -> int:
    """Smallest top-to-bottom sum in a triangle, keeping the full table."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    table = [list(triangle[0])]
    for row in triangle[1:]:
        table.append(_next_triangle_row(row, table[-1]))
    return min(table[-1])


def triangle_min_path_sum_optimized(triangle: Grid) -> int:
    """Smallest top-to-bottom sum in a triangle, keeping only the previous row."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    prev = list(triangle[0])
    for row in triangle[1:]:
        prev = _next_triangle_row(row, prev)
    return min(prev)


def unique_paths(n: int, m: int) -> int:
    """Number of right/down paths across an ``n`` x ``m`` grid (memoised)."""
    _check_size(n, m)

    @cache
    def count(r: int, c: int) -> int:
        if r < 0 or c < 0:
            return 0
        if r == 0 and c == 0:
            return 1
        return count(r - 1, c) + count(r, c - 1)

    return count(n - 1, m - 1)


def unique_paths_tabulated(n: int, m: int) -> int:
    """Number of right/down paths across an ``n`` x ``m`` grid (full table)."""
    _check_size(n, m)
    dp = [[0] * m for _ in range(n)]
    for r in range(n):
        for c in range(m):
            if r == 0 and c == 0:
                dp[r][c] = 1
            else:
                dp[r][c] = (dp[r][c - 1] if c > 0 else 0) + (dp[r - 1][c] if r > 0 else 0)
    return dp[n - 1][m - 1]


def unique_paths_optimized(n: int, m: int) -> int:
    """Number of right/down paths across an ``n`` x ``m`` grid (one row of state)."""
    _check_size(n, m)
    row = [1] * m
    for _ in range(1, n):
        for c in range(1, m):
            row[c] += row[c - 1]
    return row[m - 1]


def unique_paths_with_obstacles(grid: Grid) -> int:
    """Right/down paths avoiding cells equal to -1 (memoised)."""
    rows, cols = _dimensions(grid)

    @cache
    def count(r: int, c: int) -> int:
        if r < 0 or c < 0 or grid[r][c] == OBSTACLE:
            return 0
        if r == 0 and c == 0:
            return 1
        return count(r - 1, c) + count(r, c - 1)

    return count(rows - 1, cols - 1)


def unique_paths_with_obstacles_tabulated(grid: Grid) -> int:
    """Right/down paths avoiding cells equal to -1 (bottom-up)."""
    rows, cols = _dimensions(grid)
    dp = [[0] * cols for _ in range(rows)]
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == OBSTACLE:
                dp[r][c] = 0
            elif r == 0 and c == 0:
                dp[r][c] = 1
            else:
                dp[r][c] = (dp[r - 1][c] if r > 0 else 0) + (dp[r][c - 1] if c > 0 else 0)
    return dp[rows - 1][cols - 1]