"""Subset-style dynamic programming: sign assignment, subset sum, knapsacks and coins."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cache


def count_target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Number of ways to put ``+`` or ``-`` before every number so they total ``target``."""
    ways = Counter({0: 1})
    for value in nums:
        following: Counter[int] = Counter()
        for total, count in ways.items():
            following[total + value] += count
            following[total - value] += count
        ways = following
    return ways[target]


def subset_sum_exists(nums: Iterable[int], target: int) -> bool:
    """Whether some subset of the non-negative ``nums`` sums exactly to ``target``."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("subset_sum_exists() requires non-negative numbers")
    if target < 0:
        return False
    mask = (1 << (target + 1)) - 1
    reachable = 1  # bit s is set when sum s can be formed
    for value in values:
        reachable |= (reachable << value) & mask
    return bool(reachable >> target & 1)


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Best total value of ``(weight, value)`` items, each taken at most once."""
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError(f"item weight {weight} is negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def unbounded_knapsack(
    values: Sequence[int], weights: Sequence[int], capacity: int
) -> int:
    """Best total value when every item may be taken any number of times."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        if weight <= 0:
            raise ValueError(f"item weight {weight} must be positive")
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def _validate_coins(coins: Iterable[int], target: int) -> tuple[int, ...]:
    denominations = tuple(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must not be negative")
    return denominations


def min_coins(coins: Iterable[int], target: int) -> int:
    """Fewest coins summing to ``target`` with unlimited supply; -1 if impossible."""
    denominations = _validate_coins(coins, target)
    fewest: list[float] = [0] + [math.inf] * target
    for coin in denominations:
        for amount in range(coin, target + 1):
            fewest[amount] = min(fewest[amount], fewest[amount - coin] + 1)
    return -1 if fewest[target] == math.inf else int(fewest[target])


def min_coins_recursive(coins: Iterable[int], target: int) -> int:
    """Fewest coins summing to ``target``, by memoised recursion; -1 if impossible."""
    denominations = _validate_coins(coins, target)

    @cache
    def fewest(index: int, remaining: int) -> float:
        if remaining == 0:
            return 0
        if index < 0:
            return math.inf
        coin = denominations[index]
        take = 1 + fewest(index, remaining - coin) if coin <= remaining else math.inf
        return min(take, fewest(index - 1, remaining))

    result = fewest(len(denominations) - 1, target)
    return -1 if result == math.inf else int(result)