"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
import time
import tracemalloc

from ..core.exceptions import UnsatisfiableGridError
from ..core.grid import Grid


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    rounds: int = 0

    # Deduction counts
    placements: int = 0
    eliminations: int = 0
    stalled: bool = False
    contradiction: bool = False

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "rounds": self.rounds,
            "placements": self.placements,
            "eliminations": self.eliminations,
            "stalled": self.stalled,
            "contradiction": self.contradiction,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> Tuple[Grid, SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        The input grid is left untouched; the solver works on a copy.

        Args:
            grid: The puzzle to solve.

        Returns:
            Tuple of (final grid state, stats). The grid is returned even
            when it is not complete, so the caller can inspect how far the
            solver got.
        """
        self.stats = SolverStats(algorithm=self.name)
        work = grid.copy()

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            self._solve(work)
        except UnsatisfiableGridError as e:
            self.stats.contradiction = True
            self.stats.extra["error"] = str(e)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.solved = work.is_complete()
        return work, self.stats

    @abstractmethod
    def _solve(self, grid: Grid) -> None:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            grid: A copy of the puzzle to solve, modified in place.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
