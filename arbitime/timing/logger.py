"""Time computations and write the timing message to stderr."""

import functools
import sys
from typing import Any, TextIO

from .formatter import format_pair, format_time, iter_pairs


def _emit(message: str, file: TextIO | None = None) -> None:
    # whole line in a single write
    stream = file if file is not None else sys.stderr
    stream.write(f"{message}\n")
    stream.flush()


def log_time(*args: Any, file: TextIO | None = None) -> Any:
    """Time computations, print one line per computation, return results.

    Accepts the same forms as format_time(). For a sequence of pairs each
    line is written as soon as its computation finishes, so if a later
    computation raises, the lines already written stay written.

    Args:
        *args: A computation, a label and a computation, or a sequence of
            (label, computation) pairs.
        file: Text stream to write to. Defaults to sys.stderr.

    Returns:
        The computation's result, or a list of results for the sequence form.
    """
    if len(args) == 1 and not callable(args[0]):
        results = []
        for label, computation in iter_pairs(args[0]):
            message, result = format_pair(label, computation)
            _emit(message, file)
            results.append(result)
        return results

    message, result = format_time(*args)
    _emit(message, file)
    return result


def timed(label: Any = None, file: TextIO | None = None):
    """Decorator that logs the execution time of every call.

    Usage:
        @timed
        def load(): ...

        @timed("Database query")
        def query(sql): ...

    The label defaults to the function's qualified name.
    """
    if callable(label):
        return timed(file=file)(label)

    def decorator(func):
        name = label if label is not None else func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return log_time(name, lambda: func(*args, **kwargs), file=file)

        return wrapper

    return decorator
