"""
This module defines the board seeder used to start a new grid.
"""

import logging
import random

from .config import BOX_WIDTH
from .solver import check_dimensions
from .util import empty_grid

logger = logging.getLogger(__name__)

def generate(rows=9, cols=9, rng=None):
    """Make a grid with a random digit in the top-left corner of each box
    on the main diagonal and every other cell empty.

    rng is anything with a randint method, such as random.Random(seed); by
    default the module level generator is used. The seeded digits are not
    checked against each other, so on grids bigger than 9x9 the result may
    already have no solution.
    """
    check_dimensions(rows, cols)
    randint = random.randint if rng is None else rng.randint
    grid = empty_grid(rows, cols)
    for n in range(0, min(rows, cols), BOX_WIDTH):
        grid[n][n] = randint(1, 9)
    logger.debug(
        'Seeded %dx%d grid: %s', rows, cols,
        [grid[n][n] for n in range(0, min(rows, cols), BOX_WIDTH)]
    )
    return grid
