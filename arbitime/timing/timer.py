"""Timing primitives: a context manager and a one-shot measure()."""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Generic, NamedTuple, TypeVar

from ..utils.duration import Duration

T = TypeVar("T")


@dataclass
class TimingResult:
    """Stores elapsed time from a timing context."""

    elapsed: Duration = field(default_factory=Duration)


class TimedResult(NamedTuple, Generic[T]):
    """Duration of a single evaluation paired with the value it produced."""

    duration: Duration
    result: T


@contextmanager
def timer():
    """Context manager that measures elapsed time on a monotonic clock.

    Usage:
        with timer() as t:
            do_something()
        print(f"Took {t.elapsed}")
    """
    result = TimingResult()
    start = time.perf_counter_ns()
    try:
        yield result
    finally:
        result.elapsed = Duration(time.perf_counter_ns() - start)


def measure(computation: Callable[[], T]) -> TimedResult[T]:
    """Evaluate a zero-argument computation once and time it.

    Exceptions raised by the computation propagate unchanged and no
    TimedResult is produced.

    Args:
        computation: Callable taking no arguments.

    Returns:
        TimedResult(duration, result), where result is the exact object
        the computation returned.
    """
    with timer() as t:
        result = computation()
    return TimedResult(t.elapsed, result)
