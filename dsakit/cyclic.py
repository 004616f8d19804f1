"""Cyclic sort for sequences holding the numbers 1..n."""

from __future__ import annotations

from collections.abc import MutableSequence


def cycle_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` in place, given it is a permutation of 1..len(nums).

    Raises ValueError if a value is out of range or repeated.
    """
    n = len(nums)
    i = 0
    while i < n:
        value = nums[i]
        if value == i + 1:
            i += 1
            continue
        if not 1 <= value <= n:
            raise ValueError(f"value {value!r} is outside the range 1..{n}")
        if nums[value - 1] == value:
            raise ValueError(f"value {value!r} occurs more than once")
        nums[i], nums[value - 1] = nums[value - 1], value