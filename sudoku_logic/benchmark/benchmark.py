"""Benchmarking framework for the logic solver."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import os

from tqdm import tqdm

from ..core.grid import Grid
from ..solvers import BaseSolver, LogicSolver

# Reference puzzles, easiest first. The first two fall to singles alone; the
# last ones need techniques beyond the default strategy set.
SAMPLE_PUZZLES: List[str] = [
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    "003020600900305001001806400008102900700000008006708200002609500800203009005010300",
    "200080300060070084030500209000105408000000000402706000301007040720040060004010003",
    "000000907000420180000705026100904000050000040000507009920108000034059000507000000",
    "000000000000003085001020000000507000004000100090000000500009007070040000300000008",
    "800000000003600000070090200050007000000045700000100030001000068008500010090000400",
]

OUTCOMES = ("solved", "stalled", "contradiction")


@dataclass
class BenchmarkResult:
    """Results from running the solver on one puzzle."""
    puzzle_id: int
    puzzle: str
    clues: int
    outcome: str
    rounds: int
    placements: int
    eliminations: int
    time_seconds: float
    memory_bytes: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.outcome == "solved"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "clues": self.clues,
            "outcome": self.outcome,
            "solved": self.solved,
            "rounds": self.rounds,
            "placements": self.placements,
            "eliminations": self.eliminations,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            **self.extra
        }


class Benchmark:
    """
    Runs the solver over a puzzle collection and collects per-puzzle metrics.
    """

    def __init__(
        self,
        puzzles: Optional[List[str]] = None,
        solver: Optional[BaseSolver] = None,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: 81-character puzzle strings (default: SAMPLE_PUZZLES).
            solver: Solver instance to measure (default: LogicSolver()).
        """
        self.puzzles = list(SAMPLE_PUZZLES if puzzles is None else puzzles)
        self.solver = solver or LogicSolver()
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the solver on every puzzle.

        Returns:
            List of BenchmarkResult objects, in puzzle order.
        """
        self.results = []
        for puzzle_id, puzzle in enumerate(
            tqdm(self.puzzles, desc="Benchmarking", disable=not show_progress)
        ):
            self.results.append(self._run_single(puzzle_id, puzzle))
        return self.results

    def _run_single(self, puzzle_id: int, puzzle: str) -> BenchmarkResult:
        """Run the solver on a single puzzle."""
        grid = Grid.from_string(puzzle)
        _, stats = self.solver.solve(grid)

        if stats.solved:
            outcome = "solved"
        elif stats.contradiction:
            outcome = "contradiction"
        else:
            outcome = "stalled"

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle,
            clues=grid.count_filled(),
            outcome=outcome,
            rounds=stats.rounds,
            placements=stats.placements,
            eliminations=stats.eliminations,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            extra=dict(stats.extra),
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "total_puzzles": len(self.results),
            "algorithm": self.solver.name,
            "outcomes": {o: 0 for o in OUTCOMES},
        }
        if not self.results:
            return summary

        for r in self.results:
            summary["outcomes"][r.outcome] += 1

        times = [r.time_seconds for r in self.results]
        rounds = [r.rounds for r in self.results]
        memory = [r.memory_bytes for r in self.results]
        solved = [r for r in self.results if r.solved]

        summary.update({
            "accuracy": len(solved) / len(self.results) * 100,
            "avg_time_seconds": sum(times) / len(times),
            "max_time_seconds": max(times),
            "min_time_seconds": min(times),
            "avg_rounds": sum(rounds) / len(rounds),
            "max_rounds": max(rounds),
            "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
            "total_solved": len(solved),
        })
        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)
