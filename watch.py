#! /usr/bin/env python3

"""Watch the backtracking solver fill in a grid in the terminal."""

import argparse
import logging
import random
import sys
import threading

from sudokuviz.config import DEFAULT_PACING, MIN_PACING, MAX_PACING, clamp_pacing
from sudokuviz.create import generate
from sudokuviz.errors import SudokuError, SolveCancelled
from sudokuviz.solver import BacktrackingSolver
from sudokuviz.util import string_to_grid, format_grid

logger = logging.getLogger('watch')

CLEAR = '\x1b[H\x1b[2J'

class TerminalRenderer:
    """Observer that redraws the whole grid on every step."""
    def __init__(self, grid, stream=None):
        self.grid = grid
        self.stream = sys.stdout if stream is None else stream
        self.frames = 0

    def __call__(self):
        self.frames += 1
        self.stream.write(CLEAR + format_grid(self.grid) + '\n')
        self.stream.write('step {}\n'.format(self.frames))
        self.stream.flush()

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        '--speed', type=int, default=DEFAULT_PACING,
        help='pause after each step in ms ({} - fast, {} - slow)'.format(
            MIN_PACING, MAX_PACING)
    )
    parser.add_argument('--puzzle', help='81 character puzzle string')
    parser.add_argument('--seed', type=int, help='seed for the board generator')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )
    if args.puzzle:
        grid = string_to_grid(args.puzzle)
    else:
        grid = generate(rng=random.Random(args.seed))

    cancel = threading.Event()
    renderer = TerminalRenderer(grid)
    solver = BacktrackingSolver(clamp_pacing(args.speed), renderer, cancel)
    result = {}

    def work():
        try:
            result['solved'] = solver.solve(grid)
        except SudokuError as e:
            result['error'] = e

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    try:
        while worker.is_alive():
            worker.join(0.1)
    except KeyboardInterrupt:
        cancel.set()
        worker.join()

    error = result.get('error')
    if isinstance(error, SolveCancelled):
        logger.info('Cancelled')
        return 1
    if error is not None:
        logger.error('%s', error)
        return 1
    print(format_grid(grid))
    if result.get('solved'):
        logger.info('Solved in %d steps', renderer.frames)
        return 0
    logger.info('No solution')
    return 1

if __name__ == '__main__':
    sys.exit(main())
