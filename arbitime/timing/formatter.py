"""Time computations and render the duration as a readable message."""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Generic, NamedTuple, TypeVar

from ..utils.duration import Duration
from .timer import measure

T = TypeVar("T")

MESSAGE = "Execution time: {duration}"
LABELED_MESSAGE = "{label} - Execution time: {duration}"

USAGE = (
    "format_time() takes a computation, a (label, computation) pair of "
    "arguments, or a sequence of (label, computation) pairs"
)


class FormattedResult(NamedTuple, Generic[T]):
    """Timing message paired with the value the computation produced."""

    message: str
    result: T


def render_message(duration: Duration, label: Any = None) -> str:
    """Build the timing message for a duration and optional label."""
    if label is None:
        return MESSAGE.format(duration=duration)
    return LABELED_MESSAGE.format(label=label, duration=duration)


def _check_callable(computation: Any) -> None:
    if not callable(computation):
        raise TypeError(f"{USAGE}; got non-callable {type(computation).__name__}")


def iter_pairs(
    pairs: Iterable[tuple[Any, Callable]] | Mapping[Any, Callable],
) -> list[tuple[Any, Callable]]:
    """Normalize form (c) input to a list of (label, computation) tuples.

    Accepts a mapping of label to computation (insertion order) or any
    iterable of 2-tuples. Shapes are checked before anything runs.
    """
    if isinstance(pairs, Mapping):
        items = list(pairs.items())
    elif isinstance(pairs, (str, bytes)):
        raise TypeError(f"{USAGE}; got a bare {type(pairs).__name__}")
    else:
        try:
            items = list(pairs)
        except TypeError:
            raise TypeError(f"{USAGE}; got {type(pairs).__name__}") from None

    normalized = []
    for item in items:
        if not isinstance(item, tuple) or len(item) != 2:
            raise TypeError(f"{USAGE}; expected (label, computation), got {item!r}")
        label, computation = item
        _check_callable(computation)
        normalized.append((label, computation))
    return normalized


def format_pair(label: Any, computation: Callable[[], T]) -> FormattedResult[T]:
    """Time one labelled computation."""
    duration, result = measure(computation)
    return FormattedResult(render_message(duration, label), result)


def format_time(*args: Any) -> FormattedResult | list[FormattedResult]:
    """Time one or more computations and format each duration.

    Forms:
        format_time(computation)
            -> FormattedResult("Execution time: 1.2µs", result)
        format_time(label, computation)
            -> FormattedResult("label - Execution time: 1.2µs", result)
        format_time([(label, computation), ...])
            -> [FormattedResult, ...] in input order

    Multiple pairs are evaluated one after another in the order given.
    An exception from any computation propagates and the call returns
    nothing.

    Returns:
        A FormattedResult, or a list of them for the sequence form.
    """
    if len(args) == 1:
        (arg,) = args
        if callable(arg):
            duration, result = measure(arg)
            return FormattedResult(render_message(duration), result)
        return [format_pair(label, fn) for label, fn in iter_pairs(arg)]

    if len(args) == 2:
        label, computation = args
        _check_callable(computation)
        return format_pair(label, computation)

    raise TypeError(f"{USAGE}; got {len(args)} arguments")
