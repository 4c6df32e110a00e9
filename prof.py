#! /usr/bin/env python3

"""Basic profiling for the backtracking solver"""

import profile
import random

from sudokuviz.create import generate
from sudokuviz.solver import BacktrackingSolver
from sudokuviz.util import string_to_grid

# Easy puzzle with a unique solution; naive backtracking needs a few
# thousand placements for it.
EASY = ('53..7....6..195....98....6.8...6...34..8.3..17...2...6'
        '.6....28....419..5....8..79')

def grids():
    rng = random.Random(267)
    for n in range(20):
        yield generate(rng=rng)
    yield string_to_grid(EASY)

def main():
    solver = BacktrackingSolver()
    for grid in grids():
        solver.solve(grid)

if __name__ == '__main__':
    profile.run(main.__code__, sort='tottime')
