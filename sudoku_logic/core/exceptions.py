"""Exception types raised by the Sudoku core."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .cell import Position


class SudokuError(Exception):
    """Base class for all errors raised by sudoku_logic."""


class InvalidGridError(SudokuError, ValueError):
    """Raised when a grid cannot be built from the supplied input."""


class UnsatisfiableGridError(SudokuError):
    """
    Raised when the grid reaches a state that has no valid completion.

    Attributes:
        positions: Unsolved cells whose candidate set became empty.
        conflicts: ``(unit_kind, unit_index, digit)`` for every digit placed
            more than once in a unit.
    """

    def __init__(
        self,
        message: str,
        positions: Optional[Sequence[Position]] = None,
        conflicts: Optional[Sequence[Tuple[str, int, int]]] = None,
    ):
        super().__init__(message)
        self.positions: List[Position] = list(positions or [])
        self.conflicts: List[Tuple[str, int, int]] = list(conflicts or [])
