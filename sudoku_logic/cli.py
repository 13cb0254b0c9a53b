"""Command-line interface for the logic Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .core import Grid, SudokuError, UnsatisfiableGridError, load_grid, load_puzzles, save_grid
from .solvers import LogicSolver

EXIT_SOLVED = 0
EXIT_ERROR = 1
EXIT_STALLED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-logic",
        description="Logical Sudoku solver (constraint propagation, no guessing)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given as an 81-character string
  sudoku-logic solve --puzzle "530070000600195000..."

  # Solve a grid file and show every deduction, round by round
  sudoku-logic solve --file grid.txt --steps --export solved.txt

  # Benchmark the solver on a puzzle collection
  sudoku-logic benchmark --input puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="Grid file: one row per line, x for empty cells"
    )
    solve_parser.add_argument(
        "--steps", action="store_true",
        help="Print the deductions of every round"
    )
    solve_parser.add_argument(
        "--export", "-o", type=str, default=None,
        help="Write the final grid to this file"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the solver")
    bench_parser.add_argument(
        "--input", "-i", type=str, default=None,
        help="Puzzle collection, one 81-char puzzle per line (default: built-in samples)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "solve":
        return cmd_solve(args)
    return cmd_benchmark(args)


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        grid = Grid.from_string(args.puzzle) if args.puzzle is not None else load_grid(args.file)
    except (SudokuError, OSError) as e:
        print(f"Error reading puzzle: {e}")
        return EXIT_ERROR

    print("Input puzzle:")
    print(grid)
    print()

    solver = LogicSolver()
    rounds = 0
    try:
        while not grid.is_complete() and solver.advance(grid):
            rounds += 1
            if args.steps:
                print(f"Round {rounds}:")
                for deduction in solver.history[-1]:
                    print(f"  {deduction.describe()}")
    except UnsatisfiableGridError as e:
        print(f"✗ Contradiction: {e}")
        print(grid)
        return EXIT_ERROR

    print(grid)
    if args.export:
        save_grid(grid, args.export)
        print(f"Grid saved to {args.export}")

    if grid.is_complete():
        print(f"✓ Solved in {rounds} rounds")
        return EXIT_SOLVED
    print(f"✗ Stalled after {rounds} rounds with {grid.count_empty()} cells open")
    return EXIT_STALLED


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.input) if args.input else None
    except (SudokuError, OSError) as e:
        print(f"Error reading puzzles: {e}")
        return EXIT_ERROR

    benchmark = Benchmark(puzzles=puzzles)

    print("=" * 60)
    print("LOGIC SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(benchmark.puzzles)}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nRESULTS SUMMARY")
    print("-" * 50)
    outcomes = summary["outcomes"]
    print(f"  Solved: {outcomes['solved']}  Stalled: {outcomes['stalled']}  "
          f"Contradiction: {outcomes['contradiction']}")
    if results:
        print(f"  Accuracy: {summary['accuracy']:.1f}%")
        print(f"  Avg Rounds: {summary['avg_rounds']:.1f}")
        print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {summary['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)
    print(f"\nResults saved to {args.output}/")

    if not args.no_charts and results:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        for chart in charts:
            print(f"  - {chart}")

    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
