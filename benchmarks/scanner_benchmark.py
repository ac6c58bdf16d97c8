#!/usr/bin/env python3
"""
Scanner Throughput Benchmark
============================

Measures how fast the Lox scanner turns source text into tokens, for a
range of input sizes.

Features:
- Best-of-N timing per input size
- Tokens/second and characters/second
- Resident memory growth while scanning
- System information for benchmark context
"""

import time
import platform
import statistics
import psutil
from typing import Dict, List
from dataclasses import dataclass
from contextlib import contextmanager
import gc
import sys
import os

# Add the project root to the path so the lox package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lox.lexer import Scanner


SAMPLE_SOURCE = """class Point {
  init(x, y) {
    this.x = x;
    this.y = y;
  }

  // Euclidean length, more or less
  length() {
    return this.x * this.x + this.y * this.y;
  }
}

var p = Point(3, 4.25);
if (p.length() >= 25 and p != nil) {
  print "long enough";
} else {
  print "too short";
}
"""


@dataclass
class BenchmarkResult:
    """Results from benchmarking one input size."""
    copies: int
    source_chars: int
    token_count: int
    best_time_ms: float
    mean_time_ms: float
    memory_usage_mb: float

    @property
    def tokens_per_second(self) -> float:
        return self.token_count / (self.best_time_ms / 1000)

    @property
    def chars_per_second(self) -> float:
        return self.source_chars / (self.best_time_ms / 1000)


@dataclass
class SystemInfo:
    """Information about the system running the benchmark."""
    cpu_info: str
    memory_gb: float
    python_version: str
    python_implementation: str


class ScannerBenchmark:
    """
    Scanner throughput benchmark suite.
    """

    def __init__(self, num_runs: int = 5):
        self.num_runs = num_runs
        self.system_info = self._get_system_info()
        self.last_memory_usage = 0.0

    def _get_system_info(self) -> SystemInfo:
        """Collect system information for benchmark context."""
        return SystemInfo(
            cpu_info=platform.processor() or "Unknown CPU",
            memory_gb=psutil.virtual_memory().total / (1024**3),
            python_version=platform.python_version(),
            python_implementation=platform.python_implementation(),
        )

    @contextmanager
    def _memory_tracker(self):
        """Context manager to track memory usage during benchmark."""
        process = psutil.Process()
        start_memory = process.memory_info().rss / (1024**2)  # MB

        try:
            yield
        finally:
            end_memory = process.memory_info().rss / (1024**2)  # MB
            self.last_memory_usage = end_memory - start_memory

    def benchmark_size(self, copies: int) -> BenchmarkResult:
        """Benchmark scanning ``copies`` concatenated copies of the sample."""
        source = SAMPLE_SOURCE * copies
        times = []
        tokens = []

        gc.collect()
        with self._memory_tracker():
            for _ in range(self.num_runs):
                start_time = time.perf_counter()
                tokens = Scanner(source).scan_tokens()
                end_time = time.perf_counter()
                times.append((end_time - start_time) * 1000)

        return BenchmarkResult(
            copies=copies,
            source_chars=len(source),
            token_count=len(tokens),
            best_time_ms=min(times),
            mean_time_ms=statistics.mean(times),
            memory_usage_mb=self.last_memory_usage,
        )

    def run(self, sizes: List[int]) -> Dict[int, BenchmarkResult]:
        """Run the benchmark for each size and print a summary table."""
        info = self.system_info
        print("Lox Scanner Benchmark")
        print("=" * 72)
        print(f"CPU: {info.cpu_info}")
        print(f"Memory: {info.memory_gb:.1f} GB")
        print(f"Python: {info.python_implementation} {info.python_version}")
        print()
        print(f"{'copies':>8} {'chars':>10} {'tokens':>9} {'best ms':>9} "
              f"{'mean ms':>9} {'tok/s':>12} {'mem MB':>8}")

        results = {}
        for copies in sizes:
            result = self.benchmark_size(copies)
            results[copies] = result
            print(f"{result.copies:>8} {result.source_chars:>10} {result.token_count:>9} "
                  f"{result.best_time_ms:>9.2f} {result.mean_time_ms:>9.2f} "
                  f"{result.tokens_per_second:>12,.0f} {result.memory_usage_mb:>8.2f}")

        return results


def main():
    benchmark = ScannerBenchmark()
    benchmark.run([1, 10, 100, 1000])


if __name__ == "__main__":
    main()
