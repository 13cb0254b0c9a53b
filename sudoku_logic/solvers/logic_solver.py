"""Logical (non-guessing) Sudoku solver driven by a fixed list of strategies."""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .base_solver import BaseSolver
from .strategies import DEFAULT_STRATEGIES, Strategy
from ..core.deduction import Deduction, RemoveCandidates, SetValue
from ..core.grid import Grid

log = logging.getLogger(__name__)


class LogicSolver(BaseSolver):
    """
    Sudoku solver using pure constraint propagation.

    Solving proceeds in rounds. Each round reads a snapshot of the grid,
    runs every strategy against every unsolved cell, and only then applies
    the collected deductions in one batch, so no strategy sees a change made
    in the same round, not even one made to the cell it is examining.

    Strategies run in list order, all against the round-start snapshot; for
    each cell the first ``SetValue`` ends that cell's turn. Removals
    proposed before it are kept.

    ``history`` collects the deductions of every productive round since the
    last :meth:`reset`. ``solve`` resets it; callers driving :meth:`advance`
    themselves should call :meth:`reset` before each new puzzle.

    The solver never guesses. When a round produces nothing on an
    incomplete grid, the puzzle needs techniques beyond this strategy set
    and the solver reports a stall.
    """

    name = "Logic"

    def __init__(self, strategies: Optional[Sequence[Strategy]] = None):
        """
        Args:
            strategies: Ordered strategies to run on each cell. Defaults to
                the ten standard strategies.
        """
        super().__init__()
        self.strategies = tuple(DEFAULT_STRATEGIES if strategies is None else strategies)
        self.history: List[List[Deduction]] = []

    def reset(self) -> None:
        """Forget the rounds recorded so far."""
        self.history = []

    def deduce(self, grid: Grid) -> List[Deduction]:
        """
        Collect the deductions for one round without touching the grid.

        Returns:
            Deductions in row-major cell order, then strategy order.
        """
        snapshot = grid.copy()
        deductions: List[Deduction] = []

        for cell in snapshot.unsolved_cells():
            for strategy in self.strategies:
                proposal = strategy(cell, snapshot)
                if proposal is None:
                    continue
                if isinstance(proposal, SetValue):
                    deductions.append(proposal)
                    break
                # Only digits the cell held at round start
                digits = cell.candidates.intersection(proposal.digits)
                if digits:
                    deductions.append(
                        RemoveCandidates.of(cell.position, digits, proposal.reason)
                    )

        return deductions

    def advance(self, grid: Grid) -> bool:
        """
        Run one round and apply its deductions to ``grid``.

        Returns:
            True if anything changed, False at a fixed point.

        Raises:
            UnsatisfiableGridError: If the grid is inconsistent before the
                round, or the round leaves a cell without candidates or a
                digit twice in a unit. The round is applied in full first.
        """
        grid.check_consistency()
        deductions = self.deduce(grid)
        if log.isEnabledFor(logging.DEBUG):
            for deduction in deductions:
                log.debug(deduction.describe())
        grid.apply(deductions)
        if deductions:
            self.history.append(deductions)
        grid.check_consistency()
        return bool(deductions)

    def _solve(self, grid: Grid) -> None:
        """Advance until the grid is complete or a round changes nothing."""
        self.reset()
        try:
            while not grid.is_complete():
                if not self.advance(grid):
                    self.stats.stalled = True
                    log.info(
                        "Stalled after %d rounds with %d cells open",
                        len(self.history), grid.count_empty(),
                    )
                    return
            log.info("Solved in %d rounds", len(self.history))
        finally:
            self.stats.rounds = len(self.history)
            for deductions in self.history:
                for deduction in deductions:
                    if isinstance(deduction, SetValue):
                        self.stats.placements += 1
                    else:
                        self.stats.eliminations += 1
