"""
Placement predicates. None of these look at anything but the grid they are
given, and none of them mutate it. Coordinates are assumed to be in range.

The per-axis checks are public so they can be tested on their own, but
anything that wants to place a digit should go through is_valid_placement.
"""

from .config import BOX_WIDTH, box_origin

def row_is_free(grid, value, row):
    """True if value doesn't appear anywhere in the row."""
    return value not in grid[row]

def column_is_free(grid, value, col):
    """True if value doesn't appear anywhere in the column."""
    for line in grid:
        if line[col] == value:
            return False
    return True

def box_is_free(grid, value, row, col):
    """True if value doesn't appear in the 3x3 box containing (row, col)."""
    top, left = box_origin(row, col)
    for line in grid[top:top + BOX_WIDTH]:
        if value in line[left:left + BOX_WIDTH]:
            return False
    return True

def is_valid_placement(grid, value, row, col):
    return (row_is_free(grid, value, row) and
            column_is_free(grid, value, col) and
            box_is_free(grid, value, row, col))
