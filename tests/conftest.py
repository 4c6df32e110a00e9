# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudokuviz" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

EASY = ('53..7....6..195....98....6.8...6...34..8.3..17...2...6'
        '.6....28....419..5....8..79')

EASY_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def easy_grid():
    from sudokuviz.util import string_to_grid
    return string_to_grid(EASY)


@pytest.fixture
def easy_solution():
    return [line[:] for line in EASY_SOLUTION]


@pytest.fixture
def contradiction_grid():
    """Two 5s in row 0. Cell (0, 7) can only take 7, after which (0, 8) has
    no candidate left, so the search fails after one placement.
    """
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:7] = [5, 5, 1, 2, 3, 4, 6]
    grid[3][7] = 8
    grid[4][7] = 9
    grid[6][8] = 8
    grid[7][8] = 9
    return grid
