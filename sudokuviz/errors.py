"""This is where exceptions defined for the sudokuviz package are located."""

class SudokuError(Exception):
    """Base exception for any errors defined in this package."""

class InvalidGridError(SudokuError, ValueError):
    """Raised before any search or generation work begins when the
    dimensions of a grid are unusable. The reason attribute holds a
    human readable explanation; the subclasses tell the two cases apart.
    """
    default_reason = "Grid not valid!"

    def __init__(self, reason=None):
        if reason is None:
            reason = self.default_reason
        self.reason = reason
        super().__init__(reason)

class SizeNotDivisibleByThree(InvalidGridError):
    """A dimension of the grid is not a multiple of three, so it can't be
    tiled with 3x3 boxes.
    """
    default_reason = "The grid has to be divisible by 3!"

class EmptyGrid(InvalidGridError):
    """A dimension of the grid is zero or negative. Zero passes the
    divisibility test, so this is checked second.
    """
    default_reason = "The grid cannot be 0 by 0!"

class SolveCancelled(SudokuError):
    """Raised by a solver when its cancel event is set during a pause.
    By the time this propagates, every trial placement has been retracted.
    """
