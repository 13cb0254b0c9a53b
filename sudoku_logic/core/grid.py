"""Sudoku grid: 81 cells with candidate tracking."""

from __future__ import annotations
import logging
import numpy as np
from typing import Iterable, List, Optional, Sequence, Tuple

from .cell import BOX_SIZE, SIZE, Cell, Position, check_digit
from .deduction import Deduction, RemoveCandidates, SetValue
from .exceptions import InvalidGridError, UnsatisfiableGridError
from .validator import find_conflicts, is_complete_array

log = logging.getLogger(__name__)

CELL_COUNT = SIZE * SIZE


def _normalise_digit(raw) -> Optional[int]:
    """Map one input entry to a digit, or None for an empty cell."""
    if raw is None:
        return None
    if isinstance(raw, (bool, str, bytes)) or not isinstance(raw, (int, np.integer)):
        raise InvalidGridError(f"Cell entries must be integers or None, got {raw!r}")
    if raw == 0:
        return None
    return check_digit(int(raw))


def _flatten(values) -> List[Optional[int]]:
    """Accept a flat 81-sequence, 9 rows of 9, or a 9x9 array."""
    if isinstance(values, np.ndarray):
        if values.shape not in ((SIZE, SIZE), (CELL_COUNT,)):
            raise InvalidGridError(
                f"Grid shape must be ({SIZE}, {SIZE}), got {values.shape}"
            )
        return [_normalise_digit(v) for v in values.flatten().tolist()]

    values = list(values)
    if len(values) == SIZE and all(
        isinstance(row, (list, tuple, np.ndarray)) for row in values
    ):
        flat = []
        for i, row in enumerate(values):
            row = list(row)
            if len(row) != SIZE:
                raise InvalidGridError(f"Row {i} must have {SIZE} cells, got {len(row)}")
            flat.extend(row)
        values = flat

    if len(values) != CELL_COUNT:
        raise InvalidGridError(f"Grid must have {CELL_COUNT} cells, got {len(values)}")
    return [_normalise_digit(v) for v in values]


def _check_unit_index(kind: str, index: int) -> None:
    if not 0 <= index < SIZE:
        raise InvalidGridError(f"{kind} index must be 0-{SIZE - 1}, got {index}")


class Grid:
    """
    A 9x9 Sudoku grid.

    Cells are immutable and owned by the grid; the only way to change the
    grid is :meth:`apply`, which replaces cells according to a batch of
    deductions.
    """

    def __init__(self, values: Optional[Sequence] = None):
        """
        Initialize a grid.

        Args:
            values: 81 entries in row-major order, 9 rows of 9 entries, or a
                9x9 numpy array. ``None`` and ``0`` mark empty cells. If
                omitted, every cell is empty.

        Raises:
            InvalidGridError: On a wrong cell count or a digit outside 1-9.
        """
        digits = [None] * CELL_COUNT if values is None else _flatten(values)
        self._cells: List[Cell] = [
            Cell.empty(Position.from_index(i)) if d is None
            else Cell.solved(Position.from_index(i), d)
            for i, d in enumerate(digits)
        ]

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Grid:
        """
        Build a grid from explicit cells, keeping their candidate sets.

        Args:
            cells: 81 cells; the cell at index ``i`` must sit at
                ``Position.from_index(i)``.
        """
        cells = list(cells)
        if len(cells) != CELL_COUNT:
            raise InvalidGridError(f"Grid must have {CELL_COUNT} cells, got {len(cells)}")
        for i, cell in enumerate(cells):
            if not isinstance(cell, Cell):
                raise InvalidGridError(f"Expected Cell at index {i}, got {cell!r}")
            if cell.position.index != i:
                raise InvalidGridError(f"Cell at index {i} has position {cell.position}")
        grid = cls()
        grid._cells = cells
        return grid

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from an 81-character string.

        ``0`` or ``.`` mark empty cells, ``1``-``9`` are givens.
        """
        if len(s) != CELL_COUNT:
            raise InvalidGridError(f"String length must be {CELL_COUNT}, got {len(s)}")
        digits = []
        for i, c in enumerate(s):
            if c in "0.":
                digits.append(None)
            elif c in "123456789":
                digits.append(int(c))
            else:
                raise InvalidGridError(f"Unexpected character {c!r} at position {i}")
        return cls(digits)

    def to_string(self) -> str:
        """Compact 81-character form, ``0`` for empty cells."""
        return "".join(str(c.value) if c.is_solved else "0" for c in self._cells)

    def to_array(self) -> np.ndarray:
        """Values as a 9x9 int32 array, 0 for empty cells."""
        return np.array(
            [c.value or 0 for c in self._cells], dtype=np.int32
        ).reshape(SIZE, SIZE)

    def copy(self) -> Grid:
        return Grid.from_cells(self._cells)

    # Inspection

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def get(self, position: Position) -> Cell:
        return self._cells[position.index]

    def value(self, row: int, column: int) -> Optional[int]:
        return self._cells[Position(row, column).index].value

    def candidates(self, row: int, column: int) -> frozenset:
        return self._cells[Position(row, column).index].candidates

    def unsolved_cells(self) -> List[Cell]:
        return [c for c in self._cells if not c.is_solved]

    def count_filled(self) -> int:
        return sum(1 for c in self._cells if c.is_solved)

    def count_empty(self) -> int:
        return CELL_COUNT - self.count_filled()

    # Units

    def cells_in_row(self, row: int) -> Tuple[Cell, ...]:
        _check_unit_index("Row", row)
        return tuple(self._cells[row * SIZE:(row + 1) * SIZE])

    def cells_in_column(self, column: int) -> Tuple[Cell, ...]:
        _check_unit_index("Column", column)
        return tuple(self._cells[column::SIZE])

    def cells_in_box(self, box: int) -> Tuple[Cell, ...]:
        """The 9 cells of ``box``, top-left to bottom-right."""
        _check_unit_index("Box", box)
        r0 = (box // BOX_SIZE) * BOX_SIZE
        c0 = (box % BOX_SIZE) * BOX_SIZE
        return tuple(
            self._cells[(r0 + i) * SIZE + c0 + j]
            for i in range(BOX_SIZE)
            for j in range(BOX_SIZE)
        )

    # Mutation

    def apply(self, deductions: Iterable[Deduction]) -> None:
        """
        Apply a batch of deductions in order.

        ``SetValue`` replaces the target with a solved cell.
        ``RemoveCandidates`` strikes digits from the target, and is ignored
        once the target has been solved earlier in the same batch.
        """
        deductions = list(deductions)
        for deduction in deductions:
            if not isinstance(deduction, (SetValue, RemoveCandidates)):
                raise TypeError(f"Unknown deduction {deduction!r}")

        for deduction in deductions:
            index = deduction.position.index
            cell = self._cells[index]
            if isinstance(deduction, SetValue):
                self._cells[index] = cell.with_value(deduction.digit)
            elif cell.is_solved:
                log.debug("Skipping %s: cell already solved", deduction.describe())
            else:
                self._cells[index] = cell.without(deduction.digits)

    # State checks

    def is_complete(self) -> bool:
        """True iff every row, column and box holds each digit exactly once."""
        if self.count_empty():
            return False
        return is_complete_array(self.to_array())

    def contradictions(self) -> List[Position]:
        """Positions of unsolved cells that have no candidates left."""
        return [c.position for c in self._cells if c.is_contradiction]

    def conflicts(self) -> List[Tuple[str, int, int]]:
        """Digits placed more than once in a unit, as ``(kind, index, digit)``."""
        return find_conflicts(self)

    def check_consistency(self) -> None:
        """
        Raise if the grid can no longer be completed.

        Raises:
            UnsatisfiableGridError: When a cell ran out of candidates or a
                unit holds a digit twice.
        """
        positions = self.contradictions()
        conflicts = self.conflicts()
        if not positions and not conflicts:
            return
        parts = []
        if positions:
            parts.append("no candidates left at " + ", ".join(str(p) for p in positions))
        if conflicts:
            parts.append("duplicate digits: " + ", ".join(
                f"{d} in {kind} {i}" for kind, i, d in conflicts
            ))
        raise UnsatisfiableGridError("; ".join(parts), positions, conflicts)

    def __str__(self) -> str:
        """Pretty-print the values."""
        lines = []
        horizontal_sep = "+" + ("-" * (BOX_SIZE * 2 + 1) + "+") * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = "|"
            for j, cell in enumerate(self.cells_in_row(i)):
                row_str += f" {cell.value}" if cell.is_solved else " ."
                if (j + 1) % BOX_SIZE == 0:
                    row_str += " |"
            lines.append(row_str)

        lines.append(horizontal_sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells
