import logging
import time
from dataclasses import dataclass

from .algorithms import algorithm_name, get_algorithm
from .observe import check_bounds

log = logging.getLogger(__name__)


def benchmark(function, *args, **kwargs) -> int:
    """
    Nanoseconds taken by exactly one call of ``function(*args, **kwargs)``.

    Whatever the call does (observer pacing included) is inside the timed
    block. A call that never returns hangs the harness.
    """
    start = time.perf_counter_ns()
    function(*args, **kwargs)
    stop  = time.perf_counter_ns()
    return stop - start


def is_nondecreasing(xs) -> bool:
    return all(not (xs[i+1] < xs[i]) for i in range(len(xs) - 1))


@dataclass
class RunRecord:
    """One timed sort call."""
    algorithm: str
    size: int
    steps: int
    elapsed_ns: int
    correct: bool

    @property
    def seconds(self) -> float:
        return self.elapsed_ns / 1e9

    @property
    def minutes(self) -> float:
        return self.seconds / 60.0


def time_sort(key, arr, observer=None, **options) -> RunRecord:
    """Run the registered algorithm ``key`` on ``arr`` under :func:`benchmark`."""
    fn = get_algorithm(key)
    first, last = check_bounds(arr, options.get("first", 0), options.get("last"))
    result = {}

    def call():
        result["steps"] = fn(arr, observer, **options)

    elapsed = benchmark(call)
    rec = RunRecord(
        algorithm=algorithm_name(key),
        size=last - first,
        steps=result["steps"],
        elapsed_ns=elapsed,
        correct=is_nondecreasing(arr[first:last]),
    )
    log.info("%s on %d elements: %d steps in %.6fs", rec.algorithm, rec.size, rec.steps, rec.seconds)
    return rec

