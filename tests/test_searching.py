import math
import statistics

import pytest

from dsakit.searching import (
    binary_search,
    binary_search_recursive,
    find_peak_element,
    find_peak_grid,
    first_and_last_occurrence,
    lower_bound,
    median_of_matrix,
    nth_root,
    search_rotated,
    search_rotated_with_duplicates,
    single_non_duplicate,
    sqrt_with_precision,
    upper_bound,
)

SAMPLE = [2, 5, 7, 8, 11, 12]


@pytest.mark.parametrize("target", SAMPLE)
def test_binary_search_finds_present(target):
    index = binary_search(SAMPLE, target)
    assert SAMPLE[index] == target


@pytest.mark.parametrize("target", [0, 3, 9, 13])
def test_binary_search_missing(target):
    assert binary_search(SAMPLE, target) == -1


def test_binary_search_empty():
    assert binary_search([], 4) == -1


@pytest.mark.parametrize("target", SAMPLE)
def test_recursive_matches_iterative(target):
    assert binary_search_recursive(SAMPLE, target) == binary_search(SAMPLE, target)


def test_recursive_missing_and_range():
    assert binary_search_recursive(SAMPLE, 6) == -1
    assert binary_search_recursive(SAMPLE, 2, 1, 5) == -1
    assert SAMPLE[binary_search_recursive(SAMPLE, 11, 2, 5)] == 11


@pytest.mark.parametrize("target", [0, 2, 4, 5, 8, 9, 12])
def test_lower_bound_invariant(target):
    i = lower_bound(SAMPLE, target)
    assert SAMPLE[i] >= target
    assert i == 0 or SAMPLE[i - 1] < target


@pytest.mark.parametrize("target", [0, 2, 4, 5, 8, 9, 11])
def test_upper_bound_invariant(target):
    i = upper_bound(SAMPLE, target)
    assert SAMPLE[i] > target
    assert i == 0 or SAMPLE[i - 1] <= target


def test_bounds_past_end():
    assert lower_bound(SAMPLE, 13) == -1
    assert upper_bound(SAMPLE, 12) == -1
    assert lower_bound([], 1) == -1


def test_bounds_with_duplicates():
    nums = [1, 3, 3, 3, 5]
    assert nums[lower_bound(nums, 3)] == 3
    assert nums[lower_bound(nums, 3) - 1] < 3
    assert nums[upper_bound(nums, 3)] == 5


@pytest.mark.parametrize("target", [1, 2, 3, 5, 7])
def test_first_and_last_occurrence(target):
    nums = [1, 2, 2, 2, 3, 5, 5, 7]
    first, last = first_and_last_occurrence(nums, target)
    assert first == nums.index(target)
    assert last - first + 1 == nums.count(target)
    assert nums[last] == target


@pytest.mark.parametrize("nums", [[], [1, 2, 4], [5, 5]])
def test_first_and_last_absent(nums):
    assert first_and_last_occurrence(nums, 3) == (-1, -1)


def test_find_peak_documented_example():
    assert find_peak_element([1, 2, 1, 3, 5, 6, 4]) == 5


@pytest.mark.parametrize(
    "nums", [[1], [3, 1], [1, 3], [1, 2, 3, 1], [5, 4, 3, 2], [1, 3, 2, 4, 1, 0]]
)
def test_find_peak_is_peak(nums):
    i = find_peak_element(nums)
    assert i == 0 or nums[i] > nums[i - 1]
    assert i == len(nums) - 1 or nums[i] > nums[i + 1]


def test_find_peak_empty():
    with pytest.raises(ValueError):
        find_peak_element([])


@pytest.mark.parametrize(
    "mat",
    [
        [[1, 4], [3, 2]],
        [[10, 20, 15], [21, 30, 14], [7, 16, 32]],
        [[5]],
        [[1, 2, 3, 4, 5]],
    ],
)
def test_find_peak_grid_is_peak(mat):
    r, c = find_peak_grid(mat)
    value = mat[r][c]
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(mat) and 0 <= nc < len(mat[0]):
            assert value > mat[nr][nc]


def test_find_peak_grid_empty():
    with pytest.raises(ValueError):
        find_peak_grid([])


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 3, 5], [2, 6, 9], [3, 6, 9]],
        [[1, 2], [3, 4]],
        [[1, 2], [2, 4]],
        [[7]],
        [[1, 10, 20, 30], [2, 3, 4, 5]],
    ],
)
def test_median_of_matrix(matrix):
    flat = [x for row in matrix for x in row]
    assert median_of_matrix(matrix) == pytest.approx(statistics.median(flat))


def test_median_empty():
    with pytest.raises(ValueError):
        median_of_matrix([])


def test_nth_root_documented_example():
    assert nth_root(81, 4) == 3


@pytest.mark.parametrize("base,power", [(2, 10), (5, 3), (7, 2), (12, 1)])
def test_nth_root_round_trip(base, power):
    assert nth_root(base**power, power) == base


@pytest.mark.parametrize("num,n", [(80, 4), (10, 2), (26, 3)])
def test_nth_root_not_whole(num, n):
    assert nth_root(num, n) == -1


def test_nth_root_small():
    assert nth_root(1, 5) == 1
    assert nth_root(0, 3) == 0


@pytest.mark.parametrize("n", [2, 3, 10, 50])
@pytest.mark.parametrize("precision", [1, 3, 5])
def test_sqrt_with_precision(n, precision):
    root = sqrt_with_precision(n, precision)
    assert root <= math.sqrt(n) + 1e-9
    assert math.sqrt(n) - root < 10 ** (-precision) + 1e-9


def test_sqrt_perfect_square_and_small():
    assert sqrt_with_precision(49, 3) == pytest.approx(7.0)
    assert sqrt_with_precision(1, 4) == 1.0


ROTATED = [4, 5, 6, 7, 0, 1, 2]


@pytest.mark.parametrize("target", ROTATED)
def test_search_rotated_found(target):
    assert ROTATED[search_rotated(ROTATED, target)] == target


@pytest.mark.parametrize("target", [3, 8, -1])
def test_search_rotated_missing(target):
    assert search_rotated(ROTATED, target) == -1


def test_search_rotated_empty():
    assert search_rotated([], 1) == -1


@pytest.mark.parametrize("nums", [[2, 5, 6, 0, 0, 1, 2], [1, 0, 1, 1, 1], [3, 1, 1]])
def test_search_rotated_duplicates(nums):
    for target in range(-1, 8):
        assert search_rotated_with_duplicates(nums, target) == (target in nums)


def test_single_non_duplicate_documented_example():
    assert single_non_duplicate([1, 1, 2, 3, 3, 4, 4, 8, 8]) == 2


@pytest.mark.parametrize(
    "nums,expected",
    [
        ([4], 4),
        ([1, 2, 2], 1),
        ([1, 1, 2], 2),
        ([3, 3, 7, 7, 10, 11, 11], 10),
        ([1, 1, 2, 2, 3, 4, 4, 5, 5], 3),
    ],
)
def test_single_non_duplicate_positions(nums, expected):
    assert single_non_duplicate(nums) == expected


def test_single_non_duplicate_empty():
    with pytest.raises(ValueError):
        single_non_duplicate([])