"""Concurrent accessor races and variant comparison."""

from .harness import benchmark_accessor, compare_variants, race_accessor, run_race
from .models import AccessBenchmark, RaceReport

__all__ = [
    "AccessBenchmark",
    "RaceReport",
    "benchmark_accessor",
    "compare_variants",
    "race_accessor",
    "run_race",
]
