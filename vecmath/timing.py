"""Stopwatch and a small benchmark harness for the matrix products."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .backends import available_backends
from .logging_utils import debug_log_call
from .matrix import Matrix, apply_as_column, compose
from .precision import SINGLE
from .vector import Point

logger = logging.getLogger(__name__)


class Stopwatch:
    """Measures elapsed wall time in milliseconds.

    ``start()`` resets the watch.  Each ``stop()`` records the time since the
    last ``start()``, so several calls note several spans from one origin.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self._end = 0.0

    def start(self) -> None:
        self._start = self._end = self._clock()

    def stop(self) -> None:
        self._end = self._clock()

    @property
    def elapsed(self) -> float:
        return 1.0e3 * (self._end - self._start)

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


@dataclass
class BenchmarkResult:
    name: str
    iterations: int
    elapsed_ms: float

    @property
    def rate(self) -> float:
        """Million calls per second."""

        if self.elapsed_ms <= 0.0:
            return float("inf")
        return self.iterations / (self.elapsed_ms * 1.0e3)

    def describe(self) -> str:
        return (
            f"{self.name}: {self.iterations:,} = {self.elapsed_ms:.3f} msec"
            f" ({self.rate:.4f} Mcalls/sec)"
        )


def benchmark(
    name: str,
    operation: Callable[[], object],
    iterations: int,
    *,
    stopwatch: Optional[Stopwatch] = None,
) -> BenchmarkResult:
    """Call ``operation`` ``iterations`` times and time the loop."""

    if iterations <= 0:
        raise ValueError("iterations must be positive")
    watch = stopwatch or Stopwatch()
    with watch:
        for _ in range(iterations):
            operation()
    result = BenchmarkResult(name=name, iterations=iterations, elapsed_ms=watch.elapsed)
    logger.info("%s", result.describe())
    return result


@debug_log_call(logger, log_result=False)
def run_benchmarks(
    iterations: int = 10000,
    backends: Optional[Sequence[str]] = None,
) -> List[BenchmarkResult]:
    """Time matrix creation, copy, Matrix x Matrix and Matrix x Vector per backend."""

    identity = Matrix(dtype=SINGLE)
    translate = Matrix.translation(1.0, 2.0, 1.0, dtype=SINGLE)
    pt = Point(1.0, 1.0, 1.0, dtype=SINGLE)

    results = [
        benchmark("Matrix creation", lambda: Matrix(dtype=SINGLE), iterations),
        benchmark("Matrix copy", translate.copy, iterations),
    ]
    for name in backends or available_backends():
        results.append(
            benchmark(
                f"{name} mm_mult",
                lambda name=name: compose(identity, translate, backend=name),
                iterations,
            )
        )
        results.append(
            benchmark(
                f"{name} mv_mult",
                lambda name=name: apply_as_column(translate, pt, backend=name),
                iterations,
            )
        )
    return results


__all__ = ["Stopwatch", "BenchmarkResult", "benchmark", "run_benchmarks"]
