"""Race singleton accessors from many threads and compare the variants."""

import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

from singleton_idioms.config.manager import get_config_manager
from singleton_idioms.config.schemas import RaceConfig
from singleton_idioms.domain.exceptions import ValidationError
from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.race.models import AccessBenchmark, RaceReport
from singleton_idioms.singletons.catalog import get_variant_catalog

logger = get_logger(__name__)


def _race_config(config: Optional[RaceConfig]) -> RaceConfig:
    """Explicit config, else the managed race section with runtime overrides applied."""
    if config is not None:
        return config

    manager = get_config_manager()
    loaded = manager.app_config.race
    return RaceConfig(
        workers=manager.get_int("race.workers", loaded.workers),
        construction_delay=manager.get_float("race.construction_delay", loaded.construction_delay),
        start_timeout=manager.get_float("race.start_timeout", loaded.start_timeout),
        join_timeout=manager.get_float("race.join_timeout", loaded.join_timeout),
        benchmark_calls=manager.get_int("race.benchmark_calls", loaded.benchmark_calls),
    )


def race_accessor(accessor: Callable[[], Any],
                  workers: int,
                  start_timeout: float = 5.0,
                  join_timeout: float = 10.0,
                  variant: str = "accessor",
                  construction_count: Optional[Callable[[], int]] = None) -> RaceReport:
    """
    Call accessor from ``workers`` threads released at the same instant.

    All workers wait on one barrier and call the accessor as soon as it
    trips. Errors raised in a worker, including a broken barrier, are recorded
    in the report rather than propagated.

    Args:
        accessor: Zero-argument callable returning the shared instance
        workers: Number of racing threads
        start_timeout: Seconds a worker waits at the barrier
        join_timeout: Seconds to wait for each worker to finish
        variant: Name reported in the result
        construction_count: Optional callable read after the race

    Returns:
        RaceReport describing what the workers observed

    Raises:
        ValidationError: If workers is less than 1
    """
    if workers < 1:
        raise ValidationError("At least one worker is required", details={"workers": workers})

    barrier = threading.Barrier(workers)
    results_lock = threading.Lock()
    # Strong references keep observed objects alive so their ids stay unique
    observed: Dict[str, Any] = {}
    errors: Dict[str, str] = {}

    def worker() -> None:
        name = threading.current_thread().name
        try:
            barrier.wait(timeout=start_timeout)
            instance = accessor()
        except Exception as e:
            with results_lock:
                errors[name] = f"{type(e).__name__}: {e}"
            return
        with results_lock:
            observed[name] = instance

    threads = [
        threading.Thread(target=worker, name=f"{variant}-racer-{i + 1}", daemon=True)
        for i in range(workers)
    ]

    started = time.perf_counter()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(join_timeout)
        if thread.is_alive():
            with results_lock:
                errors[thread.name] = f"did not finish within {join_timeout}s"
    elapsed = time.perf_counter() - started

    with results_lock:
        identities = {name: id(instance) for name, instance in observed.items()}
        report = RaceReport(
            variant=variant,
            workers=workers,
            constructions=construction_count() if construction_count is not None else None,
            distinct_instances=len(set(identities.values())),
            identities=identities,
            errors=dict(errors),
            elapsed_seconds=elapsed,
        )
    return report


def run_race(name: str,
             workers: Optional[int] = None,
             construction_delay: Optional[float] = None,
             config: Optional[RaceConfig] = None) -> RaceReport:
    """
    Reset the named variant and race its accessor.

    Arguments left as None are taken from the race configuration. The
    variant's previous construction delay is restored afterwards.
    """
    race_config = _race_config(config)
    variant = get_variant_catalog().get_variant(name)
    workers = race_config.workers if workers is None else workers
    delay = race_config.construction_delay if construction_delay is None else construction_delay

    variant.reset_instance()
    previous_delay = variant.set_construction_delay(delay)
    try:
        report = race_accessor(
            variant.get_instance,
            workers,
            start_timeout=race_config.start_timeout,
            join_timeout=race_config.join_timeout,
            variant=name,
            construction_count=variant.construction_count,
        )
    finally:
        variant.set_construction_delay(previous_delay)

    if report.consistent:
        logger.info(
            "Race finished, single instance observed",
            variant=name,
            workers=report.workers,
            elapsed_seconds=round(report.elapsed_seconds, 4),
        )
    else:
        logger.warning(
            "Singleton property violated",
            variant=name,
            workers=report.workers,
            constructions=report.constructions,
            distinct_instances=report.distinct_instances,
            errors=len(report.errors),
        )
    return report


def compare_variants(names: Optional[Iterable[str]] = None,
                     workers: Optional[int] = None,
                     construction_delay: Optional[float] = None,
                     config: Optional[RaceConfig] = None) -> List[RaceReport]:
    """Race every named variant, in catalog order when names is None."""
    if names is None:
        names = get_variant_catalog().get_registered_variants()
    return [
        run_race(name, workers=workers, construction_delay=construction_delay, config=config)
        for name in names
    ]


def benchmark_accessor(name: str,
                       calls: Optional[int] = None,
                       config: Optional[RaceConfig] = None) -> AccessBenchmark:
    """Time repeated accessor calls once the instance exists."""
    calls = _race_config(config).benchmark_calls if calls is None else calls
    if calls < 1:
        raise ValidationError("At least one call is required", details={"calls": calls})

    variant = get_variant_catalog().get_variant(name)
    variant.get_instance()

    started = time.perf_counter()
    for _ in range(calls):
        variant.get_instance()
    total = time.perf_counter() - started

    benchmark = AccessBenchmark(variant=name, calls=calls, total_seconds=total)
    logger.info(
        "Accessor benchmark finished",
        variant=name,
        calls=calls,
        per_call_ns=round(benchmark.per_call_ns, 1),
    )
    return benchmark
