"""Greedy algorithms: consecutive splits and maximum earning from extra work days."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence


def can_split_consecutive(nums: Sequence[int]) -> bool:
    """Whether sorted ``nums`` splits into runs of 3 or more consecutive integers."""
    available = Counter(nums)
    run_ends: Counter[int] = Counter()
    for value in nums:
        if available[value] == 0:
            continue
        available[value] -= 1
        if run_ends[value - 1] > 0:
            run_ends[value - 1] -= 1
            run_ends[value] += 1
        elif available[value + 1] > 0 and available[value + 2] > 0:
            available[value + 1] -= 1
            available[value + 2] -= 1
            run_ends[value + 2] += 1
        else:
            return False
    return True


def maximum_earning(days: str, k: int, fixed_pay: int, bonus: int) -> int:
    """Most money earnable when up to ``k`` off days ('0') may be turned into work days.

    Every work day ('1') pays ``fixed_pay``; a work day right after another
    also earns ``bonus``.
    """
    if set(days) - {"0", "1"}:
        raise ValueError("days must contain only '0' and '1'")
    if k < 0:
        raise ValueError("k must not be negative")

    earning = 0
    for i, day in enumerate(days):
        if day == "1":
            earning += fixed_pay
            if i and days[i - 1] == "1":
                earning += bonus

    between: list[int] = []
    at_edge: list[int] = []
    isolated: list[int] = []
    for run in re.finditer("0+", days):
        start, end = run.span()
        length = end - start
        left, right = start > 0, end < len(days)
        if left and right:
            between.append(length)
        elif left or right:
            at_edge.append(length)
        else:
            isolated.append(length)

    remaining = k
    # Short gaps between work days are cheapest to close, joining two streaks.
    for length in sorted(between):
        if remaining == 0:
            break
        used = min(remaining, length)
        earning += used * fixed_pay + (used + (used == length)) * bonus
        remaining -= used
    for length in at_edge:
        if remaining == 0:
            break
        used = min(remaining, length)
        earning += used * (fixed_pay + bonus)
        remaining -= used
    for length in isolated:
        if remaining == 0:
            break
        used = min(remaining, length)
        earning += used * fixed_pay + (used - 1) * bonus
        remaining -= used
    return earning