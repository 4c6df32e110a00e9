"""Backtracking Sudoku solver with hooks for watching it work."""

from .errors import (SudokuError, InvalidGridError, SizeNotDivisibleByThree,
                     EmptyGrid, SolveCancelled)
from .checker import (row_is_free, column_is_free, box_is_free,
                      is_valid_placement)
from .solver import BacktrackingSolver, validate, solve
from .create import generate
