"""Reading and writing grids as text files."""

from __future__ import annotations
import logging
from typing import List

from .cell import SIZE
from .exceptions import InvalidGridError
from .grid import CELL_COUNT, Grid

log = logging.getLogger(__name__)

PLACEHOLDERS = frozenset("x.0_")
LINE_SEPARATOR = "\r\n"


def _parse_row(line: str, line_number: int) -> List[int]:
    tokens = line.split()
    if len(tokens) == 1 and len(tokens[0]) == SIZE:
        tokens = list(tokens[0])
    if len(tokens) != SIZE:
        raise InvalidGridError(
            f"Line {line_number}: expected {SIZE} cells, got {len(tokens)}"
        )
    row = []
    for token in tokens:
        if token.lower() in PLACEHOLDERS:
            row.append(0)
        elif len(token) == 1 and token in "123456789":
            row.append(int(token))
        else:
            raise InvalidGridError(f"Line {line_number}: unexpected cell {token!r}")
    return row


def parse_grid_text(text: str) -> Grid:
    """
    Parse a grid written one row per line.

    Cells are separated by whitespace; ``x`` (or ``.``, ``0``, ``_``) marks an
    empty cell. Rows written as 9 unseparated characters are accepted too.
    Blank lines are ignored.

    Raises:
        InvalidGridError: If a row is malformed or there are not 9 rows.
    """
    rows = []
    for line_number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        rows.append(_parse_row(line, line_number))
    if len(rows) != SIZE:
        raise InvalidGridError(f"Expected {SIZE} rows, got {len(rows)}")
    return Grid(rows)


def format_grid_text(grid: Grid, placeholder: str = "x") -> str:
    """Render values one row per line, cells separated by spaces."""
    lines = []
    for row in range(SIZE):
        lines.append(" ".join(
            str(cell.value) if cell.is_solved else placeholder
            for cell in grid.cells_in_row(row)
        ))
    return LINE_SEPARATOR.join(lines)


def load_grid(path: str) -> Grid:
    """Read a grid file written in the row-per-line format."""
    with open(path, "r") as f:
        grid = parse_grid_text(f.read())
    log.info("Loaded grid from %s (%d givens)", path, grid.count_filled())
    return grid


def save_grid(grid: Grid, path: str) -> None:
    """Write the grid's values to ``path`` in the row-per-line format."""
    with open(path, "w", newline="") as f:
        f.write(format_grid_text(grid))
    log.info("Saved grid to %s", path)


def load_puzzles(path: str) -> List[str]:
    """
    Read a puzzle collection: one 81-character puzzle per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        InvalidGridError: If a puzzle line is not a valid 81-character grid.
    """
    puzzles = []
    with open(path, "r") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if len(line) != CELL_COUNT:
                raise InvalidGridError(
                    f"{path}:{line_number}: expected {CELL_COUNT} characters, got {len(line)}"
                )
            Grid.from_string(line)
            puzzles.append(line)
    log.info("Loaded %d puzzles from %s", len(puzzles), path)
    return puzzles
