"""Cell and position value types."""

from __future__ import annotations
import numbers
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from .exceptions import InvalidGridError

SIZE = 9
BOX_SIZE = 3
DIGITS: FrozenSet[int] = frozenset(range(1, SIZE + 1))


def check_digit(digit: int) -> int:
    """Return ``digit`` as an int, or raise if it is not in 1..9."""
    if isinstance(digit, bool) or digit not in DIGITS:
        raise InvalidGridError(f"Digit must be 1-{SIZE}, got {digit!r}")
    return int(digit)


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate on the 9x9 grid. Rows and columns are 0-based."""

    row: int
    column: int

    def __post_init__(self):
        for name in ("row", "column"):
            coord = getattr(self, name)
            if isinstance(coord, bool) or not isinstance(coord, numbers.Integral):
                raise InvalidGridError(f"Position {name} must be an integer, got {coord!r}")
            object.__setattr__(self, name, int(coord))
        if not (0 <= self.row < SIZE and 0 <= self.column < SIZE):
            raise InvalidGridError(
                f"Position out of range: row={self.row}, column={self.column}"
            )

    @property
    def box(self) -> int:
        """Index (0-8) of the 3x3 box, counted left to right, top to bottom."""
        return BOX_SIZE * (self.row // BOX_SIZE) + self.column // BOX_SIZE

    @property
    def index(self) -> int:
        """Row-major index 0..80."""
        return self.row * SIZE + self.column

    @classmethod
    def from_index(cls, index: int) -> Position:
        return cls(*divmod(index, SIZE))

    def __str__(self) -> str:
        return f"r{self.row}c{self.column}"


@dataclass(frozen=True)
class Cell:
    """
    One square of the grid.

    A cell either holds a value (and no candidates) or a set of digits that
    are still possible for it. An unsolved cell without candidates is a
    contradiction: the grid it belongs to has no valid completion.
    """

    position: Position
    value: Optional[int] = None
    candidates: FrozenSet[int] = field(default=DIGITS)

    def __post_init__(self):
        object.__setattr__(self, "candidates", frozenset(self.candidates))
        if self.value is not None:
            object.__setattr__(self, "value", check_digit(self.value))
            if self.candidates:
                raise InvalidGridError(
                    f"Solved cell {self.position} cannot keep candidates "
                    f"{sorted(self.candidates)}"
                )
        elif not self.candidates <= DIGITS:
            raise InvalidGridError(
                f"Candidates for {self.position} must be digits 1-{SIZE}, "
                f"got {sorted(self.candidates)}"
            )

    @classmethod
    def empty(cls, position: Position) -> Cell:
        return cls(position, None, DIGITS)

    @classmethod
    def solved(cls, position: Position, digit: int) -> Cell:
        return cls(position, digit, frozenset())

    @property
    def is_solved(self) -> bool:
        return self.value is not None

    @property
    def is_contradiction(self) -> bool:
        """True for an unsolved cell that has run out of candidates."""
        return self.value is None and not self.candidates

    def without(self, digits: Iterable[int]) -> Cell:
        """Return a copy with ``digits`` struck from the candidates."""
        if self.is_solved:
            return self
        return Cell(self.position, None, self.candidates - frozenset(digits))

    def with_value(self, digit: int) -> Cell:
        return Cell.solved(self.position, digit)

    def __str__(self) -> str:
        if self.is_solved:
            return str(self.value)
        return "{" + "".join(str(d) for d in sorted(self.candidates)) + "}"
