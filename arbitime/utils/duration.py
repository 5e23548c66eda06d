"""Elapsed-time value type and its human-readable rendering."""

from dataclasses import dataclass

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

# (nanoseconds per unit, suffix, fractional digits), largest unit first
UNITS = (
    (NANOS_PER_SECOND, "s", 9),
    (NANOS_PER_MILLI, "ms", 6),
    (NANOS_PER_MICRO, "µs", 3),
    (1, "ns", 0),
)


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative elapsed time with nanosecond resolution."""

    nanos: int = 0

    def __post_init__(self):
        if self.nanos < 0:
            raise ValueError(f"Duration cannot be negative, got {self.nanos}ns")

    @property
    def seconds(self) -> float:
        return self.nanos / NANOS_PER_SECOND

    @property
    def millis(self) -> float:
        return self.nanos / NANOS_PER_MILLI

    @property
    def micros(self) -> float:
        return self.nanos / NANOS_PER_MICRO

    def __str__(self) -> str:
        return format_duration(self)


def format_duration(duration: Duration | int) -> str:
    """Render a duration with a unit chosen by magnitude.

    The largest unit that keeps the integer part non-zero is used, and the
    exact value is printed with trailing fractional zeros dropped:

        0ns, 999ns, 1.5µs, 12.345678ms, 3s, 2.000000001s

    Args:
        duration: A Duration, or an int count of nanoseconds.

    Returns:
        Rendered string such as "1.25ms".
    """
    nanos = duration.nanos if isinstance(duration, Duration) else int(duration)
    if nanos < 0:
        raise ValueError(f"Cannot format negative duration: {nanos}ns")

    for scale, suffix, digits in UNITS:
        if nanos >= scale or scale == 1:
            whole, frac = divmod(nanos, scale)
            frac_str = f"{frac:0{digits}d}".rstrip("0") if digits else ""
            if frac_str:
                return f"{whole}.{frac_str}{suffix}"
            return f"{whole}{suffix}"
