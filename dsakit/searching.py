"""Binary-search based algorithms over sorted sequences, matrices and integers."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search_recursive(
    nums: Sequence[int], target: int, low: int = 0, high: int | None = None
) -> int:
    """Recursively search ``nums[low:high + 1]`` for ``target``; -1 if absent."""
    if high is None:
        high = len(nums) - 1
    if low > high:
        return -1
    mid = (low + high) // 2
    if nums[mid] == target:
        return mid
    if nums[mid] < target:
        return binary_search_recursive(nums, target, mid + 1, high)
    return binary_search_recursive(nums, target, low, mid - 1)


def lower_bound(nums: Sequence[int], target: int) -> int:
    """Index of the first element ``>= target``, or -1 if there is none."""
    index = bisect.bisect_left(nums, target)
    return index if index < len(nums) else -1


def upper_bound(nums: Sequence[int], target: int) -> int:
    """Index of the first element ``> target``, or -1 if there is none."""
    index = bisect.bisect_right(nums, target)
    return index if index < len(nums) else -1


def first_and_last_occurrence(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``; (-1, -1) if absent."""
    first = bisect.bisect_left(nums, target)
    if first >= len(nums) or nums[first] != target:
        return (-1, -1)
    last = bisect.bisect_right(nums, target) - 1
    return (first, last)


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element strictly greater than its neighbours."""
    n = len(nums)
    if n == 0:
        raise ValueError("find_peak_element() requires a non-empty sequence")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[n - 1] > nums[n - 2]:
        return n - 1
    low, high = 1, n - 2
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            low = mid + 1
        else:
            high = mid
    return high


def find_peak_grid(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Cell (row, col) greater than its four neighbours; (-1, -1) if none found.

    Cells outside the matrix count as -1.
    """
    if not mat or not mat[0]:
        raise ValueError("find_peak_grid() requires a non-empty matrix")
    cols = len(mat[0])
    low, high = 0, cols - 1
    while low <= high:
        mid = (low + high) // 2
        max_row = max(range(len(mat)), key=lambda r: (mat[r][mid], -r))
        peak = mat[max_row][mid]
        left = mat[max_row][mid - 1] if mid > 0 else -1
        right = mat[max_row][mid + 1] if mid < cols - 1 else -1
        if peak > left and peak > right:
            return (max_row, mid)
        if left > peak:
            high = mid - 1
        else:
            low = mid + 1
    return (-1, -1)


def _count_not_greater(matrix: Sequence[Sequence[int]], value: int) -> int:
    return sum(bisect.bisect_right(row, value) for row in matrix)


def median_of_matrix(matrix: Sequence[Sequence[int]]) -> float:
    """Median of a matrix whose rows are each sorted ascending.

    For an even number of elements the two middle values are averaged.
    """
    if not matrix or not matrix[0]:
        raise ValueError("median_of_matrix() requires a non-empty matrix")
    total = sum(len(row) for row in matrix)
    median_pos = (total + 1) // 2

    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    first_median = high
    while low <= high:
        mid = (low + high) // 2
        if _count_not_greater(matrix, mid) < median_pos:
            low = mid + 1
        else:
            first_median = mid
            high = mid - 1

    if total % 2 == 1:
        return float(first_median)
    if _count_not_greater(matrix, first_median) >= median_pos + 1:
        return float(first_median)
    second_median = min(
        row[i]
        for row in matrix
        if (i := bisect.bisect_right(row, first_median)) < len(row)
    )
    return (first_median + second_median) / 2.0


def nth_root(num: int, n: int) -> int:
    """Integer ``n``-th root of ``num``, or -1 if it is not a whole number."""
    if num <= 1:
        return num
    low, high = 2, num
    while low <= high:
        mid = (low + high) // 2
        power = mid**n
        if power == num:
            return mid
        if power < num:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def sqrt_with_precision(n: int, precision: int) -> float:
    """Square root of ``n`` refined to ``precision`` decimal places (rounded down)."""
    if n <= 1:
        return float(n)
    root = float(math.isqrt(n))
    increment = 0.1
    for _ in range(precision):
        while root * root < n:
            root += increment
        if root * root > n:
            root -= increment
        increment /= 10
    return root


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    if not nums:
        return -1
    last = nums[-1]
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > last:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[mid] == nums[high]:
            high -= 1
        elif nums[mid] > nums[high]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value in a sorted sequence where every other value appears twice."""
    n = len(nums)
    if n == 0:
        raise ValueError("single_non_duplicate() requires a non-empty sequence")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[n - 1] != nums[n - 2]:
        return nums[n - 1]

    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        # The partner of an element left of the single one sits at the odd/even pair slot.
        partner_before = mid - 1 if mid % 2 else mid + 1
        partner_after = mid + 1 if mid % 2 else mid - 1
        if nums[mid] == nums[partner_before]:
            low = mid + 1
        elif nums[mid] == nums[partner_after]:
            high = mid - 1
        else:
            return nums[mid]
    raise ValueError("no single element found; every value appears in pairs")