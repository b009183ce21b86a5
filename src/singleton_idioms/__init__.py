"""Singleton Idioms - Root Package.

A comparison set of singleton implementations and a harness that races their
accessors from many threads.

Key Components:
    - singletons: the variants (lazy, synchronized, double_checked, eager,
      enum, holder, registry) and the VariantCatalog naming them
    - race: the concurrent race harness, variant comparison and benchmarks
    - config: pydantic schemas, loader and ConfigurationManager
    - infrastructure: structlog logging and the generic SingletonRegistry
    - domain: exceptions

Property under test:
    For N callers racing a variant's accessor, all N receive the same object
    and its constructor runs exactly once. Every variant holds this except
    ``lazy``, which exists to show the violation.

Usage:
    >>> from singleton_idioms import run_race
    >>> run_race("double_checked", workers=20).consistent
    True
"""

from ._version import __version__
from .race import AccessBenchmark, RaceReport, benchmark_accessor, compare_variants, race_accessor, run_race

__author__ = "Singleton Idioms Contributors"
__package_name__ = "singleton-idioms"

__all__ = [
    "__version__",
    "AccessBenchmark",
    "RaceReport",
    "benchmark_accessor",
    "compare_variants",
    "race_accessor",
    "run_race",
]
