"""
Grid geometry and pacing defaults shared by the checker, the solver and
the renderers.
"""

from itertools import chain

BOX_WIDTH = 3
DIGITS = range(1, 10)
EMPTY = 0

# Pacing is measured in milliseconds.
DEFAULT_PACING = 150
MIN_PACING = 5
MAX_PACING = 500

def box_origin(row, col):
    """Return the key of the top-left cell of the box containing (row, col)."""
    return row - row % BOX_WIDTH, col - col % BOX_WIDTH

def box_keys(row, col):
    """List the keys of the box containing (row, col), in row-major order."""
    top, left = box_origin(row, col)
    return [
        (i, j) for i in range(top, top + BOX_WIDTH)
            for j in range(left, left + BOX_WIDTH)
    ]

def calculate_houses(rows, cols):
    """Calculate the rows, cols, and boxes of a grid with the given
    dimensions. Each is a tuple of tuples of keys; houses is all three
    chained together, boxes first.
    """
    row_keys = tuple(tuple((i, j) for j in range(cols)) for i in range(rows))
    col_keys = tuple(tuple((i, j) for i in range(rows)) for j in range(cols))
    boxes = tuple(
        tuple(box_keys(i, j))
            for i in range(0, rows, BOX_WIDTH)
            for j in range(0, cols, BOX_WIDTH)
    )
    houses = tuple(chain(boxes, col_keys, row_keys))
    return row_keys, col_keys, boxes, houses

def clamp_pacing(pacing):
    """Force a pacing value into the range a renderer offers."""
    return max(MIN_PACING, min(MAX_PACING, pacing))
