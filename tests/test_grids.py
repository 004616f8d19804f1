import copy

import pytest

from dsakit.graphs.grids import count_distinct_islands, rotting_time

ORANGES = [
    [2, 1, 1],
    [1, 1, 0],
    [0, 1, 1],
]


def pad(grid):
    width = len(grid[0]) + 2
    return [[0] * width] + [[0, *row, 0] for row in grid] + [[0] * width]


def test_rotting_example():
    assert rotting_time(ORANGES) == 4


def test_rotting_does_not_modify_input():
    grid = copy.deepcopy(ORANGES)
    rotting_time(grid)
    assert grid == ORANGES


def test_rotting_unchanged_by_empty_border():
    assert rotting_time(pad(ORANGES)) == rotting_time(ORANGES)


@pytest.mark.parametrize("grid", [[[0, 2]], [[2, 2], [0, 0]], [[0]], []])
def test_rotting_without_fresh_is_zero(grid):
    assert rotting_time(grid) == 0


@pytest.mark.parametrize("grid", [[[2, 0, 1]], [[1]], [[2, 1, 0], [0, 0, 1]]])
def test_rotting_unreachable_is_minus_one(grid):
    assert rotting_time(grid) == -1


def test_extra_rotten_orange_never_slows_rotting():
    more = copy.deepcopy(ORANGES)
    more[2][2] = 2
    assert 0 <= rotting_time(more) <= rotting_time(ORANGES)


def test_translated_islands_count_once():
    single = [
        [1, 0],
        [1, 1],
    ]
    double = [
        [1, 0, 0, 1, 0],
        [1, 1, 0, 1, 1],
        [0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0],
        [0, 1, 1, 0, 0],
    ]
    assert count_distinct_islands(double) == count_distinct_islands(single)


def test_mirrored_islands_are_distinct():
    grid = [
        [1, 0, 0, 0, 1],
        [1, 1, 0, 1, 1],
    ]
    assert count_distinct_islands(grid) == 2


@pytest.mark.parametrize("grid", [[], [[0, 0], [0, 0]]])
def test_no_land_means_no_islands(grid):
    assert count_distinct_islands(grid) == 0


def test_islands_do_not_modify_input():
    grid = [[1, 1, 0], [0, 1, 0], [1, 0, 1]]
    before = copy.deepcopy(grid)
    count_distinct_islands(grid)
    assert grid == before


def test_islands_unchanged_by_empty_border():
    grid = [[1, 1, 0], [0, 1, 0], [1, 0, 1]]
    assert count_distinct_islands(pad(grid)) == count_distinct_islands(grid)