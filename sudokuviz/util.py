"""
Helpers for building, copying, parsing and printing grids.
"""

from collections import Counter

from .config import BOX_WIDTH, DIGITS, EMPTY, calculate_houses

def keygen(rows, cols):
    for n in range(rows):
        for m in range(cols):
            yield n, m

def empty_grid(rows, cols):
    return [[EMPTY] * cols for _ in range(rows)]

def copy_grid(grid):
    return [line[:] for line in grid]

def string_to_grid(string, size=9):
    """Parse a puzzle string. Each of the first size*size characters is one
    cell in row-major order; the digits 1-9 are givens and anything else
    ('.', '0', ...) is an empty cell. Short strings are padded with empty
    cells.
    """
    grid = empty_grid(size, size)
    for n, c in enumerate(string.strip()[:size * size]):
        if c in '123456789':
            grid[n // size][n % size] = int(c)
    return grid

def grid_to_string(grid, empty='.'):
    return ''.join(
        str(value) if value != EMPTY else empty
            for line in grid for value in line
    )

def format_grid(grid):
    """Render a grid as text with lines between the boxes."""
    cols = len(grid[0]) if grid else 0
    boxes_across = cols // BOX_WIDTH
    rule = '+'.join(['-' * (2 * BOX_WIDTH + 1)] * boxes_across)
    lines = []
    for i, line in enumerate(grid):
        if i and i % BOX_WIDTH == 0:
            lines.append(rule)
        chunks = []
        for left in range(0, cols, BOX_WIDTH):
            cells = line[left:left + BOX_WIDTH]
            chunks.append(' ' + ' '.join(
                str(v) if v != EMPTY else '.' for v in cells
            ) + ' ')
        lines.append('|'.join(chunks))
    return '\n'.join(lines)

def is_complete(grid):
    """True if the grid has no empty cells and no digit repeats within a
    row, column, or box. On a 9x9 grid this means every house holds each
    of 1..9 exactly once.
    """
    rows, cols = len(grid), len(grid[0]) if grid else 0
    for key in keygen(rows, cols):
        if grid[key[0]][key[1]] not in DIGITS:
            return False
    for house in calculate_houses(rows, cols)[3]:
        counts = Counter(grid[i][j] for i, j in house)
        if any(count > 1 for count in counts.values()):
            return False
    return True
