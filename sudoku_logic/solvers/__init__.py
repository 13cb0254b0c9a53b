"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .logic_solver import LogicSolver
from .strategies import DEFAULT_STRATEGIES, Strategy, find_naked_tuples

__all__ = [
    "BaseSolver",
    "SolverStats",
    "LogicSolver",
    "DEFAULT_STRATEGIES",
    "Strategy",
    "find_naked_tuples",
]
