"""Core module for Sudoku grid representation and validation."""

from .cell import DIGITS, Cell, Position
from .deduction import Deduction, RemoveCandidates, SetValue
from .exceptions import InvalidGridError, SudokuError, UnsatisfiableGridError
from .grid import Grid
from .grid_io import format_grid_text, load_grid, load_puzzles, parse_grid_text, save_grid
from .validator import find_conflicts, is_valid_grid

__all__ = [
    "DIGITS",
    "Cell",
    "Position",
    "Deduction",
    "RemoveCandidates",
    "SetValue",
    "SudokuError",
    "InvalidGridError",
    "UnsatisfiableGridError",
    "Grid",
    "format_grid_text",
    "load_grid",
    "load_puzzles",
    "parse_grid_text",
    "save_grid",
    "find_conflicts",
    "is_valid_grid",
]
