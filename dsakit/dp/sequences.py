"""Dynamic programming along sequences: frog jumps, house painting and LCS."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import cache


def frog_jump(heights: Sequence[int], k: int) -> tuple[int, list[int]]:
    """Least energy to go from step 0 to the last step, jumping up to ``k`` steps.

    A jump costs the absolute height difference. Returns the energy and the
    steps visited; on ties the shorter jump is preferred.
    """
    n = len(heights)
    if n == 0:
        raise ValueError("frog_jump() requires at least one step")
    if k < 1:
        raise ValueError("k must be at least 1")
    cost = [0] * n
    following = [-1] * n
    for i in range(n - 2, -1, -1):
        cost[i], following[i] = min(
            (cost[j] + abs(heights[i] - heights[j]), j)
            for j in range(i + 1, min(i + k, n - 1) + 1)
        )
    path = [0]
    while following[path[-1]] != -1:
        path.append(following[path[-1]])
    return cost[0], path


def _rows(points: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in points]
    if not rows or not rows[0]:
        raise ValueError("points must have at least one day and one task")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("every day must list the same number of tasks")
    return rows


def _finish(result: float) -> int:
    if result == math.inf:
        raise ValueError("no schedule avoids repeating a task on consecutive days")
    return int(result)


def paint_houses_min_cost(points: Sequence[Sequence[int]]) -> int:
    """Least total cost choosing one task a day, never the same task two days running."""
    rows = _rows(points)
    prev: list[float] = list(rows[0])
    for row in rows[1:]:
        prev = [
            cost + min((p for j, p in enumerate(prev) if j != task), default=math.inf)
            for task, cost in enumerate(row)
        ]
    return _finish(min(prev))


def paint_houses_min_cost_memo(points: Sequence[Sequence[int]]) -> int:
    """Same as :func:`paint_houses_min_cost`, by memoised recursion."""
    rows = _rows(points)
    tasks = range(len(rows[0]))

    @cache
    def best(day: int, last: int) -> float:
        if day < 0:
            return 0
        return min(
            (rows[day][task] + best(day - 1, task) for task in tasks if task != last),
            default=math.inf,
        )

    return _finish(best(len(rows) - 1, -1))


def _lcs_table(s1: str, s2: str) -> list[list[int]]:
    table = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i, a in enumerate(s1, 1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(s2, 1):
            row[j] = above[j - 1] + 1 if a == b else max(above[j], row[j - 1])
    return table


def lcs_length(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    return _lcs_table(s1, s2)[len(s1)][len(s2)]


def longest_common_subsequence(s1: str, s2: str) -> str:
    """One longest common subsequence of two strings."""
    table = _lcs_table(s1, s2)
    chars: list[str] = []
    i, j = len(s1), len(s2)
    while i and j:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] < table[i - 1][j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))