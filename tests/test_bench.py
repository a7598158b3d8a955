import time

import pytest

from sortviz.bench import RunRecord, benchmark, is_nondecreasing, time_sort
from sortviz.observe import BoundsError, Observer, Recorder


def test_benchmark_times_one_call():
    calls = []

    def slow(x, y=0):
        calls.append((x, y))
        time.sleep(0.01)

    ns = benchmark(slow, 1, y=2)
    assert calls == [(1, 2)]
    assert ns >= 10_000_000


def test_benchmark_propagates_errors():
    def boom():
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        benchmark(boom)


def test_time_sort_record():
    arr = [5, 4, 3, 2, 1]
    rec = Recorder()
    run = time_sort("bubble", arr, rec)
    assert isinstance(run, RunRecord)
    assert run.algorithm == "Bubble Sort"
    assert run.size == 5
    assert run.steps == len(rec) == 10
    assert run.correct
    assert arr == [1, 2, 3, 4, 5]
    assert run.elapsed_ns > 0
    assert run.minutes == pytest.approx(run.seconds / 60)


def test_time_sort_passes_options():
    rec = Recorder()
    time_sort("selection", [3, 2, 1], rec, policy="swap")
    assert rec.kinds == ["swap"]


def test_slow_observer_is_timed():
    class Slow(Observer):
        def notify(self, view, bounds):
            time.sleep(0.005)

    run = time_sort("insertion", [2, 1], Slow())
    assert run.seconds >= 0.005


def test_is_nondecreasing():
    assert is_nondecreasing([])
    assert is_nondecreasing([1, 1, 2])
    assert not is_nondecreasing([2, 1])


def test_time_sort_sub_range_checks_only_that_range():
    arr = [9, 8, 3, 2, 1, 0]
    run = time_sort("bubble", arr, None, first=2, last=5)
    assert arr == [9, 8, 1, 2, 3, 0]
    assert run.correct
    assert run.size == 3


def test_time_sort_rejects_bad_range():
    with pytest.raises(BoundsError):
        time_sort("quick", [3, 2, 1], None, first=2, last=1)
