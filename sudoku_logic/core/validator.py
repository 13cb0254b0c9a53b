"""Validation utilities for Sudoku grids."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Iterator, List, Tuple

from .cell import BOX_SIZE, SIZE

if TYPE_CHECKING:
    from .grid import Grid

UNIT_KINDS = ("row", "column", "box")

_ALL_DIGITS = np.arange(1, SIZE + 1, dtype=np.int32)


def iter_units(array: np.ndarray) -> Iterator[Tuple[str, int, np.ndarray]]:
    """
    Yield every unit of a 9x9 value array.

    Args:
        array: Grid values, 0 for empty cells.

    Yields:
        ``(unit_kind, unit_index, values)`` for the 9 rows, 9 columns and
        9 boxes, in that order.
    """
    for i in range(SIZE):
        yield "row", i, array[i, :]
    for j in range(SIZE):
        yield "column", j, array[:, j]
    for b in range(SIZE):
        r0 = (b // BOX_SIZE) * BOX_SIZE
        c0 = (b % BOX_SIZE) * BOX_SIZE
        yield "box", b, array[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE].flatten()


def find_conflicts(grid: Grid) -> List[Tuple[str, int, int]]:
    """
    Find digits placed more than once in a unit.

    Returns:
        A list of ``(unit_kind, unit_index, digit)``; empty for a valid grid.
    """
    conflicts = []
    for kind, index, values in iter_units(grid.to_array()):
        placed = values[values != 0]
        digits, counts = np.unique(placed, return_counts=True)
        for digit in digits[counts > 1]:
            conflicts.append((kind, index, int(digit)))
    return conflicts


def is_valid_grid(grid: Grid) -> bool:
    """Check that no unit holds the same digit twice."""
    return not find_conflicts(grid)


def is_complete_array(array: np.ndarray) -> bool:
    """True iff every row, column and box holds each digit 1-9 exactly once."""
    return all(
        np.array_equal(np.sort(values), _ALL_DIGITS)
        for _, _, values in iter_units(array)
    )
