"""Logical Sudoku solver: constraint propagation without guessing."""

from .core import Grid, Position, Cell, SetValue, RemoveCandidates
from .core import InvalidGridError, UnsatisfiableGridError
from .solvers import LogicSolver

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "Position",
    "Cell",
    "SetValue",
    "RemoveCandidates",
    "InvalidGridError",
    "UnsatisfiableGridError",
    "LogicSolver",
]
