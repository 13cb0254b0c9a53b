"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import OUTCOMES, BenchmarkResult


class Visualizer:
    """
    Chart generator for logic solver benchmark results.
    """

    # Color palette for outcomes
    COLORS = {
        "solved": "#2ecc71",        # Green
        "stalled": "#f39c12",       # Orange
        "contradiction": "#e74c3c"  # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_outcomes(),
            self.plot_rounds_distribution(),
            self.plot_time_vs_clues(),
        ]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_outcomes(self) -> str:
        """Bar chart of how many puzzles were solved, stalled or contradictory."""
        fig, ax = plt.subplots(figsize=(8, 5))

        counts = [sum(1 for r in self.results if r.outcome == o) for o in OUTCOMES]
        bars = ax.bar(OUTCOMES, counts, color=[self.COLORS[o] for o in OUTCOMES],
                      edgecolor='black', linewidth=0.5)

        for bar, count in zip(bars, counts):
            ax.annotate(f'{count}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Outcome', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Logic Solver Outcomes', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("outcomes.png")

    def plot_rounds_distribution(self) -> str:
        """Histogram of rounds per puzzle, split by outcome."""
        fig, ax = plt.subplots(figsize=(10, 6))

        max_rounds = max((r.rounds for r in self.results), default=0)
        bins = np.arange(0, max_rounds + 2) - 0.5

        for outcome in OUTCOMES:
            rounds = [r.rounds for r in self.results if r.outcome == outcome]
            if rounds:
                sns.histplot(rounds, bins=bins, ax=ax, label=outcome,
                             color=self.COLORS[outcome], alpha=0.6)

        ax.set_xlabel('Rounds', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Rounds until Solved or Stalled', fontsize=14, fontweight='bold')
        ax.legend()

        return self._save("rounds_distribution.png")

    def plot_time_vs_clues(self) -> str:
        """Scatter plot of solve time against the number of givens."""
        fig, ax = plt.subplots(figsize=(10, 6))

        for outcome in OUTCOMES:
            subset = [r for r in self.results if r.outcome == outcome]
            if subset:
                ax.scatter([r.clues for r in subset],
                           [r.time_seconds * 1000 for r in subset],
                           label=outcome, color=self.COLORS[outcome],
                           edgecolor='black', linewidth=0.5, s=50)

        ax.set_xlabel('Givens', fontsize=12)
        ax.set_ylabel('Time (ms)', fontsize=12)
        ax.set_title('Solve Time by Number of Givens', fontsize=14, fontweight='bold')
        ax.legend()

        return self._save("time_vs_clues.png")
