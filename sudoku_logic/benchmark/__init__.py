"""Benchmark module for measuring the logic solver."""

from .benchmark import Benchmark, BenchmarkResult, SAMPLE_PUZZLES
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "SAMPLE_PUZZLES", "Visualizer"]
