import random

import pytest

from sudokuviz.checker import (row_is_free, column_is_free, box_is_free,
                               is_valid_placement)


def brute_force(grid, value, row, col):
    size = len(grid)
    for n in range(size):
        if grid[row][n] == value or grid[n][col] == value:
            return False
    for i in range(size):
        for j in range(size):
            if i // 3 == row // 3 and j // 3 == col // 3 and grid[i][j] == value:
                return False
    return True


def random_grid(rng, size=9, density=0.3):
    return [
        [rng.randint(1, 9) if rng.random() < density else 0 for _ in range(size)]
        for _ in range(size)
    ]


def test_row():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][8] = 7
    assert not row_is_free(grid, 7, 4)
    assert row_is_free(grid, 7, 3)
    assert row_is_free(grid, 6, 4)


def test_column():
    grid = [[0] * 9 for _ in range(9)]
    grid[8][2] = 3
    assert not column_is_free(grid, 3, 2)
    assert column_is_free(grid, 3, 1)


def test_box():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = 9
    for i in range(3, 6):
        for j in range(3, 6):
            assert not box_is_free(grid, 9, i, j)
    assert box_is_free(grid, 9, 2, 4)
    assert box_is_free(grid, 9, 4, 6)


def test_box_on_larger_grid():
    grid = [[0] * 12 for _ in range(12)]
    grid[11][11] = 4
    assert not box_is_free(grid, 4, 9, 9)
    assert box_is_free(grid, 4, 8, 11)


@pytest.mark.parametrize('key', [(0, 0), (4, 4), (8, 8)])
def test_each_axis_blocks_placement(key):
    row, col = key
    grid = [[0] * 9 for _ in range(9)]
    grid[row][(col + 4) % 9] = 1
    assert not is_valid_placement(grid, 1, row, col)
    grid = [[0] * 9 for _ in range(9)]
    grid[(row + 4) % 9][col] = 1
    assert not is_valid_placement(grid, 1, row, col)
    grid = [[0] * 9 for _ in range(9)]
    grid[row - row % 3 + (row + 1) % 3][col - col % 3 + (col + 1) % 3] = 1
    assert not is_valid_placement(grid, 1, row, col)


def test_matches_brute_force():
    rng = random.Random(1234)
    for _ in range(50):
        grid = random_grid(rng)
        for row in range(9):
            for col in range(9):
                for value in range(1, 10):
                    expected = brute_force(grid, value, row, col)
                    assert is_valid_placement(grid, value, row, col) == expected
                    assert expected == (row_is_free(grid, value, row) and
                                        column_is_free(grid, value, col) and
                                        box_is_free(grid, value, row, col))


def test_does_not_mutate(easy_grid):
    before = [line[:] for line in easy_grid]
    is_valid_placement(easy_grid, 1, 0, 2)
    assert easy_grid == before
