"""Tests for the logic solver orchestrator."""

import pytest
from sudoku_logic.core import (
    DIGITS, Cell, Grid, Position, RemoveCandidates, SetValue, UnsatisfiableGridError,
)
from sudoku_logic.solvers import LogicSolver, strategies


# A known puzzle that falls to singles
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

EASY_PUZZLE = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"

# Needs far more than singles and naked tuples
HARD_PUZZLE = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"

# Row 0 holds 1-4 and column 0 holds 5-8, so r0c0 can only be 9
CORNER_PUZZLE = (
    "012340000"
    "000000000"
    "000000000"
    "500000000"
    "600000000"
    "700000000"
    "800000000"
    "000000000"
    "000000000"
)

MAX_ROUNDS = 81 * 9


def with_candidates(candidates, puzzle=None):
    grid = Grid.from_string(puzzle) if puzzle else Grid()
    cells = list(grid.cells)
    for (row, column), digits in candidates.items():
        cells[row * 9 + column] = Cell(Position(row, column), None, frozenset(digits))
    return Grid.from_cells(cells)


def peers_values(grid, cell):
    p = cell.position
    units = (grid.cells_in_row(p.row), grid.cells_in_column(p.column), grid.cells_in_box(p.box))
    return {c.value for unit in units for c in unit if c.is_solved}


class TestScenarios:
    """End-to-end behaviour of single rounds."""

    def test_empty_grid_makes_no_progress(self):
        """No givens: every cell keeps 9 candidates and nothing fires."""
        grid = Grid()
        before = grid.copy()
        assert LogicSolver().advance(grid) is False
        assert grid == before

    def test_last_cell_of_row_is_filled(self):
        """One empty cell in an otherwise full row gets the missing digit."""
        grid = Grid.from_string("123456780" + "0" * 72)
        LogicSolver().advance(grid)
        assert grid.value(0, 8) == 9

    def test_hidden_single_in_row(self):
        """5 is a candidate of only one cell in the row."""
        grid = with_candidates({(0, c): DIGITS - {5} for c in range(9) if c != 3})
        solver = LogicSolver()
        assert solver.deduce(grid) == [SetValue(Position(0, 3), 5)]
        assert solver.advance(grid) is True
        assert grid.value(0, 3) == 5

    def test_naked_pair_in_box(self):
        """A {2,7} pair strips 2 and 7 from the other seven cells of its box."""
        grid = with_candidates({(0, 0): {2, 7}, (1, 1): {2, 7}})
        solver = LogicSolver()

        deductions = solver.deduce(grid)
        others = [c.position for c in grid.cells_in_box(0)
                  if c.position not in (Position(0, 0), Position(1, 1))]
        assert deductions == [RemoveCandidates(p, (2, 7)) for p in others]

        solver.advance(grid)
        for p in others:
            assert grid.get(p).candidates == DIGITS - {2, 7}
        assert grid.candidates(0, 0) == {2, 7}
        assert grid.candidates(1, 1) == {2, 7}

    def test_complete_grid_is_fixed_point(self):
        grid = Grid.from_string(TEST_SOLUTION)
        assert grid.is_complete()
        before = grid.copy()
        assert LogicSolver().advance(grid) is False
        assert grid == before


class TestRound:
    """Tests for how a round collects and applies deductions."""

    def test_removals_before_set_value_are_kept(self):
        grid = with_candidates({(0, 8): {1, 9}}, puzzle="123456780" + "0" * 72)
        deductions = [d for d in LogicSolver().deduce(grid) if d.position == Position(0, 8)]
        assert deductions == [
            RemoveCandidates(Position(0, 8), (1,)),
            SetValue(Position(0, 8), 9),
        ]
        assert deductions[0].reason == "row values"
        # {1, 9} is not a naked single at round start
        assert deductions[1].reason == "hidden single in row"

    def test_strategies_read_round_start_candidates(self):
        """Eliminations that leave one candidate are placed next round, not this one."""
        grid = Grid.from_string(CORNER_PUZZLE)
        solver = LogicSolver()
        corner = Position(0, 0)

        first = [d for d in solver.deduce(grid) if d.position == corner]
        assert first
        assert all(isinstance(d, RemoveCandidates) for d in first)

        solver.advance(grid)
        assert grid.candidates(0, 0) == {9}
        assert grid.value(0, 0) is None

        solver.advance(grid)
        assert grid.value(0, 0) == 9
        assert solver.history[-1][0].reason == "naked single"

    def test_overlapping_removals_recorded(self):
        """A box removal repeating digits of a row removal is still recorded."""
        grid = Grid.from_string(CORNER_PUZZLE)
        deductions = [d for d in LogicSolver().deduce(grid) if d.position == Position(0, 0)]
        assert deductions == [
            RemoveCandidates(Position(0, 0), (1, 2, 3, 4)),
            RemoveCandidates(Position(0, 0), (5, 6, 7, 8)),
            RemoveCandidates(Position(0, 0), (1, 2)),
        ]
        assert [d.reason for d in deductions] == ["row values", "column values", "box values"]

    def test_removals_only_claim_present_candidates(self):
        """Every recorded removal strikes at least one live candidate."""
        grid = Grid.from_string(TEST_PUZZLE)
        solver = LogicSolver()
        for _ in range(3):
            for d in solver.deduce(grid):
                if isinstance(d, RemoveCandidates):
                    assert d.digits
                    assert set(d.digits) <= grid.get(d.position).candidates
            solver.advance(grid)

    def test_deduce_does_not_mutate(self):
        grid = Grid.from_string(TEST_PUZZLE)
        before = grid.copy()
        LogicSolver().deduce(grid)
        assert grid == before

    def test_round_reads_round_start_snapshot(self):
        """A value placed this round is not eliminated from peers until the next."""
        grid = Grid.from_string("123456780" + "0" * 72)
        solver = LogicSolver()
        solver.advance(grid)
        assert grid.value(0, 8) == 9
        assert 9 in grid.candidates(1, 8)
        solver.advance(grid)
        assert 9 not in grid.candidates(1, 8)

    def test_deductions_in_row_major_order(self):
        grid = Grid.from_string(TEST_PUZZLE)
        indices = [d.position.index for d in LogicSolver().deduce(grid)]
        assert indices == sorted(indices)

    def test_history_records_productive_rounds(self):
        grid = Grid.from_string(TEST_PUZZLE)
        solver = LogicSolver()
        solver.advance(grid)
        solver.advance(grid)
        assert len(solver.history) == 2
        assert all(solver.history)

    def test_reset_clears_history(self):
        """A solver reused for a new puzzle starts with an empty history."""
        solver = LogicSolver()
        solver.advance(Grid.from_string(TEST_PUZZLE))
        assert solver.history

        solver.reset()
        assert solver.history == []
        solver.advance(Grid.from_string(CORNER_PUZZLE))
        assert len(solver.history) == 1

    def test_custom_strategies(self):
        """Only the configured strategies run."""
        grid = Grid.from_string(TEST_PUZZLE)
        assert LogicSolver(strategies=[]).advance(grid) is False

        elimination_only = LogicSolver(strategies=[
            strategies.eliminate_row_values,
            strategies.eliminate_column_values,
            strategies.eliminate_box_values,
        ])
        assert elimination_only.advance(grid) is True
        assert grid.count_filled() == 30
        assert elimination_only.advance(grid) is False


class TestErrors:
    """Tests for unsatisfiable grids."""

    def test_cell_without_candidates(self):
        """Row 0 excludes 1 and column 8 excludes 2 from a cell holding {1, 2}."""
        puzzle = "100000000" + "0" * 36 + "000000002" + "0" * 27
        grid = with_candidates({(0, 8): {1, 2}}, puzzle=puzzle)
        with pytest.raises(UnsatisfiableGridError) as excinfo:
            LogicSolver().advance(grid)
        assert excinfo.value.positions == [Position(0, 8)]
        assert grid.get(Position(0, 8)).is_contradiction

    def test_placement_clashing_with_other_unit(self):
        """Row 0 forces 9 into r0c8 while column 8 already holds a 9."""
        puzzle = "123456780" + "0" * 36 + "000000009" + "0" * 27
        grid = Grid.from_string(puzzle)
        with pytest.raises(UnsatisfiableGridError) as excinfo:
            LogicSolver().advance(grid)
        assert ("column", 8, 9) in excinfo.value.conflicts
        assert grid.value(0, 8) == 9

    def test_duplicate_givens_rejected_before_round(self):
        grid = Grid.from_string("55" + "0" * 79)
        before = grid.copy()
        with pytest.raises(UnsatisfiableGridError) as excinfo:
            LogicSolver().advance(grid)
        assert ("row", 0, 5) in excinfo.value.conflicts
        assert grid == before


class TestInvariants:
    """Properties that hold across every round."""

    @pytest.mark.parametrize("puzzle", [TEST_PUZZLE, EASY_PUZZLE, HARD_PUZZLE])
    def test_rounds_are_monotonic_and_terminate(self, puzzle):
        grid = Grid.from_string(puzzle)
        solver = LogicSolver()

        for _ in range(MAX_ROUNDS):
            before = grid.cells
            changed = solver.advance(grid)
            assert grid.conflicts() == []
            for old, new in zip(before, grid.cells):
                if old.is_solved:
                    assert new == old
                elif new.is_solved:
                    assert new.value in old.candidates
                else:
                    assert new.candidates <= old.candidates
            if not changed or grid.is_complete():
                break
        else:
            pytest.fail("solver did not reach a fixed point")

    @pytest.mark.parametrize("puzzle", [TEST_PUZZLE, HARD_PUZZLE])
    def test_fixed_point_candidates_exclude_placed_digits(self, puzzle):
        grid = Grid.from_string(puzzle)
        solver = LogicSolver()
        while solver.advance(grid):
            pass
        for cell in grid.unsolved_cells():
            assert not cell.candidates & peers_values(grid, cell)

    def test_advance_at_fixed_point_is_idempotent(self):
        grid = Grid.from_string(HARD_PUZZLE)
        solver = LogicSolver()
        while solver.advance(grid):
            pass
        before = grid.copy()
        assert solver.advance(grid) is False
        assert grid == before


class TestLogicSolver:
    """Tests for the solve() harness."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        grid = Grid.from_string(TEST_PUZZLE)
        solver = LogicSolver()

        solution, stats = solver.solve(grid)

        assert stats.solved
        assert not stats.stalled
        assert solution.is_complete()
        assert solution.to_string() == TEST_SOLUTION

    def test_input_grid_untouched(self):
        grid = Grid.from_string(TEST_PUZZLE)
        LogicSolver().solve(grid)
        assert grid.to_string() == TEST_PUZZLE

    def test_stats_collected(self):
        grid = Grid.from_string(TEST_PUZZLE)
        solver = LogicSolver()

        solution, stats = solver.solve(grid)

        assert stats.algorithm == "Logic"
        assert stats.rounds == len(solver.history) > 0
        assert stats.placements == grid.count_empty()
        assert stats.eliminations > 0
        assert stats.time_seconds > 0
        assert stats.to_dict()["rounds"] == stats.rounds

    def test_solve_easy_puzzle(self):
        solution, stats = LogicSolver().solve(Grid.from_string(EASY_PUZZLE))
        assert stats.solved
        assert solution.to_string().startswith("483921657")

    def test_hard_puzzle_stalls_cleanly(self):
        solution, stats = LogicSolver().solve(Grid.from_string(HARD_PUZZLE))
        assert stats.solved or stats.stalled
        assert not stats.contradiction
        assert solution.conflicts() == []

    def test_solve_invalid(self):
        """Two 5s in the first row."""
        puzzle = "550070000600195000098000060800060003400803001700020006060000280000419005000080079"
        solution, stats = LogicSolver().solve(Grid.from_string(puzzle))
        assert not stats.solved
        assert stats.contradiction
        assert "duplicate" in stats.extra["error"]

    def test_solve_complete_grid(self):
        solution, stats = LogicSolver().solve(Grid.from_string(TEST_SOLUTION))
        assert stats.solved
        assert stats.rounds == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
