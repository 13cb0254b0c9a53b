"""
Deduction strategies for the logic solver.

Every strategy has the signature ``(cell, grid) -> Optional[Deduction]``:
it inspects one unsolved cell against a read-only grid and either proposes
a deduction for that cell or returns None. Strategies never mutate the grid.
"""

from __future__ import annotations
import collections
from typing import AbstractSet, Callable, Iterable, Optional, Sequence, Tuple

from ..core.cell import Cell
from ..core.deduction import Deduction, RemoveCandidates, SetValue
from ..core.grid import Grid

Strategy = Callable[[Cell, Grid], Optional[Deduction]]


def _row(cell: Cell, grid: Grid) -> Tuple[Cell, ...]:
    return grid.cells_in_row(cell.position.row)


def _column(cell: Cell, grid: Grid) -> Tuple[Cell, ...]:
    return grid.cells_in_column(cell.position.column)


def _box(cell: Cell, grid: Grid) -> Tuple[Cell, ...]:
    return grid.cells_in_box(cell.position.box)


def _others(cell: Cell, unit: Iterable[Cell]) -> list:
    return [other for other in unit if other.position != cell.position]


# Unit elimination

def _eliminate_placed(cell: Cell, unit: Iterable[Cell], reason: str) -> Optional[Deduction]:
    placed = {other.value for other in _others(cell, unit) if other.is_solved}
    if not placed:
        return None
    return RemoveCandidates.of(cell.position, placed, reason)


def eliminate_row_values(cell: Cell, grid: Grid) -> Optional[Deduction]:
    """Remove digits already placed in the cell's row."""
    return _eliminate_placed(cell, _row(cell, grid), "row values")


def eliminate_column_values(cell: Cell, grid: Grid) -> Optional[Deduction]:
    """Remove digits already placed in the cell's column."""
    return _eliminate_placed(cell, _column(cell, grid), "column values")


def eliminate_box_values(cell: Cell, grid: Grid) -> Optional[Deduction]:
    """Remove digits already placed in the cell's box."""
    return _eliminate_placed(cell, _box(cell, grid), "box values")


# Singles

def naked_single(cell: Cell, grid: Grid) -> Optional[Deduction]:
    """Place the last remaining candidate."""
    if len(cell.candidates) != 1:
        return None
    digit = next(iter(cell.candidates))
    return SetValue(cell.position, digit, "naked single")


def _hidden_single(cell: Cell, unit: Sequence[Cell], reason: str) -> Optional[Deduction]:
    """
    Place a digit that no other cell of the unit can take.

    Digits already placed in the unit are skipped: a stale candidate on the
    examined cell must not look like a hidden single.
    """
    others = _others(cell, unit)
    placed = {other.value for other in others if other.is_solved}
    counts = collections.Counter(d for other in others for d in other.candidates)
    for digit in sorted(cell.candidates):
        if digit not in placed and counts[digit] == 0:
            return SetValue(cell.position, digit, reason)
    return None


def hidden_single_in_row(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _hidden_single(cell, _row(cell, grid), "hidden single in row")


def hidden_single_in_column(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _hidden_single(cell, _column(cell, grid), "hidden single in column")


def hidden_single_in_box(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _hidden_single(cell, _box(cell, grid), "hidden single in box")


# Naked tuples

def find_naked_tuples(candidate_sets: Iterable[AbstractSet[int]]) -> Tuple[int, ...]:
    """
    Find digits locked into naked tuples.

    A candidate set ``S`` of size ``L`` is a naked tuple when exactly ``L``
    of the given sets (``S`` itself included) are subsets of ``S``. Those
    ``L`` cells use up all of ``S``'s digits, so no other cell of the unit
    can hold them. Sets with fewer than two candidates are ignored.

    Args:
        candidate_sets: Candidate sets of the unit's cells, excluding the
            cell the result will be applied to.

    Returns:
        Sorted digits of every naked tuple found; empty if there is none.
    """
    groups = [frozenset(s) for s in candidate_sets if len(s) > 1]
    locked = set()
    for group in groups:
        matches = sum(1 for other in groups if len(other) <= len(group) and other <= group)
        if matches == len(group):
            locked |= group
    return tuple(sorted(locked))


def _naked_tuples(cell: Cell, unit: Iterable[Cell], reason: str) -> Optional[Deduction]:
    digits = find_naked_tuples(other.candidates for other in _others(cell, unit))
    if not digits:
        return None
    return RemoveCandidates(cell.position, digits, reason)


def naked_tuples_in_row(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _naked_tuples(cell, _row(cell, grid), "naked tuple in row")


def naked_tuples_in_column(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _naked_tuples(cell, _column(cell, grid), "naked tuple in column")


def naked_tuples_in_box(cell: Cell, grid: Grid) -> Optional[Deduction]:
    return _naked_tuples(cell, _box(cell, grid), "naked tuple in box")


# Order matters: the first SetValue proposed for a cell wins the round.
DEFAULT_STRATEGIES: Tuple[Strategy, ...] = (
    eliminate_row_values,
    eliminate_column_values,
    eliminate_box_values,
    naked_single,
    hidden_single_in_row,
    hidden_single_in_column,
    hidden_single_in_box,
    naked_tuples_in_row,
    naked_tuples_in_column,
    naked_tuples_in_box,
)
