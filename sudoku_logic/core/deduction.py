"""Deductions: proposed grid mutations produced by the solving strategies."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

from .cell import Position, check_digit


@dataclass(frozen=True)
class SetValue:
    """Assign ``digit`` to the cell at ``position``."""

    position: Position
    digit: int
    reason: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "digit", check_digit(self.digit))

    def describe(self) -> str:
        text = f"{self.position} => set {self.digit}"
        return f"{text} ({self.reason})" if self.reason else text


@dataclass(frozen=True)
class RemoveCandidates:
    """Strike ``digits`` from the candidates of the cell at ``position``."""

    position: Position
    digits: Tuple[int, ...]
    reason: str = field(default="", compare=False)

    def __post_init__(self):
        digits = sorted({check_digit(d) for d in self.digits})
        object.__setattr__(self, "digits", tuple(digits))

    @classmethod
    def of(cls, position: Position, digits: Iterable[int], reason: str = "") -> RemoveCandidates:
        return cls(position, tuple(digits), reason)

    def describe(self) -> str:
        text = f"{self.position} => remove {list(self.digits)}"
        return f"{text} ({self.reason})" if self.reason else text


Deduction = Union[SetValue, RemoveCandidates]
