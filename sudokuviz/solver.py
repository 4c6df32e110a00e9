"""
This module defines the backtracking solver and the precondition check that
guards it.

The search is deliberately naive. Each level of recursion scans the grid
from the top-left corner and works on the first empty cell it finds, trying
the digits 1 through 9 in order. This keeps the order in which cells are
filled strictly row-major, which is what a renderer watching the solve
expects to see. Don't replace the scan with a "next index" parameter or a
most-constrained-cell heuristic; the sequence of observed steps would
change.

A renderer can watch the solve by passing an observer, a callable taking no
arguments. It is called after every placement and every retraction, and
each call is followed by a pause of `pacing` milliseconds.

>>> grid = generate()
>>> solver = BacktrackingSolver(pacing=20, observer=redraw)
>>> solver.solve(grid)
True
"""

import logging
import time

import gmpy2

from .checker import is_valid_placement
from .config import BOX_WIDTH, DIGITS, EMPTY, DEFAULT_PACING
from .errors import SizeNotDivisibleByThree, EmptyGrid, SolveCancelled

logger = logging.getLogger(__name__)

def check_dimensions(*dims):
    """Raise an InvalidGridError if any of the dimensions can't hold a grid.
    Divisibility is checked before positivity, so 0 is reported as an
    empty grid rather than a bad size.
    """
    for dim in dims:
        if not gmpy2.is_divisible(dim, BOX_WIDTH):
            raise SizeNotDivisibleByThree
    for dim in dims:
        if dim < 1:
            raise EmptyGrid

def validate(grid):
    """Check that a grid has a usable shape. Every row is measured, so a
    ragged grid is caught if any of its rows has a bad width.
    """
    widths = [len(line) for line in grid] or [0]
    check_dimensions(len(grid), *widths)

class BacktrackingSolver:
    """Depth first search over the empty cells of a grid. The grid is
    solved in place; if there is no solution, every trial placement is
    retracted and the grid is left as it was.

    The counters placements and retractions describe the most recent
    call to solve.
    """
    def __init__(self, pacing=DEFAULT_PACING, observer=None, cancel=None):
        if pacing < 0:
            raise ValueError('pacing must not be negative, got {}'.format(pacing))
        self.pacing = pacing
        self.observer = observer
        self.cancel = cancel
        self.placements = 0
        self.retractions = 0

    def solve(self, grid):
        """Returns True if the grid was completed, False if it has no
        solution. An InvalidGridError is raised for a badly shaped grid
        before the search starts, and SolveCancelled is raised if the cancel
        event is set while solving.
        """
        validate(grid)
        self.placements = 0
        self.retractions = 0
        logger.debug('Solving a %dx%d grid', len(grid), len(grid[0]))
        solved = self.search(grid)
        logger.debug(
            'Search %s after %d placements and %d retractions',
            'succeeded' if solved else 'failed',
            self.placements, self.retractions
        )
        return solved

    def search(self, grid):
        key = self.first_empty(grid)
        if key is None:
            return True
        i, j = key
        for digit in DIGITS:
            if not is_valid_placement(grid, digit, i, j):
                continue
            grid[i][j] = digit
            self.placements += 1
            try:
                self.step()
                if self.search(grid):
                    return True
            except BaseException:
                # nothing raised out of the search may leave a trial digit behind
                grid[i][j] = EMPTY
                raise
            grid[i][j] = EMPTY
            self.retractions += 1
            self.step()
        return False

    @staticmethod
    def first_empty(grid):
        """Find the first empty cell in row-major order, or None if the grid
        is full.
        """
        for i, line in enumerate(grid):
            for j, value in enumerate(line):
                if value == EMPTY:
                    return i, j
        return None

    def step(self):
        """Tell the observer that the grid changed, then pause."""
        if self.observer is not None:
            self.observer()
            self.pause()
        elif self.cancel is not None and self.cancel.is_set():
            self.cancelled()

    def pause(self):
        delay = self.pacing / 1000
        if self.cancel is not None:
            if self.cancel.wait(delay):
                self.cancelled()
            return
        # time.sleep resumes by itself after a signal whose handler returns,
        # so only exceptions raised by a handler end the pause early
        time.sleep(delay)

    def cancelled(self):
        logger.info('Solve cancelled after %d placements', self.placements)
        raise SolveCancelled

def solve(grid, pacing=0, observer=None, cancel=None):
    """Shortcut to call BacktrackingSolver.solve on a grid."""
    return BacktrackingSolver(pacing, observer, cancel).solve(grid)
