"""
Duration - Millisecond-resolution, non-negative time values.

Parses the ``DURATION`` argument (seconds as a float) into an exact
millisecond count:

    whole seconds   floor(value)
    milliseconds    round-half-away-from-zero((value - floor(value)) * 1000)

So ``12.3456`` becomes 12346 ms and ``14.0001`` becomes 14000 ms.
"""

import math
from dataclasses import dataclass

from .errors import DurationNegative, DurationParseError

__all__ = [
    "Duration",
    "duration_from_float",
    "format_seconds",
    "parse_duration",
]


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative duration in whole milliseconds."""

    milliseconds: int = 0

    def __post_init__(self) -> None:
        if self.milliseconds < 0:
            raise DurationNegative()

    @property
    def seconds(self) -> float:
        return self.milliseconds / 1000

    def __str__(self) -> str:
        secs, millis = divmod(self.milliseconds, 1000)
        return f"{secs}.{millis:03d}s"


def duration_from_float(duration_sec: float) -> Duration:
    """Convert seconds to a Duration rounded to the nearest millisecond.

    Raises:
        DurationNegative: If the value is below zero (including -0.0)
    """
    if duration_sec < 0 or math.copysign(1.0, duration_sec) < 0:
        raise DurationNegative()

    secs = math.floor(duration_sec)
    # Fraction is in [0, 1), so adding 0.5 rounds half away from zero
    millis = math.floor((duration_sec - secs) * 1000 + 0.5)

    return Duration(secs * 1000 + millis)


def parse_duration(text: str) -> Duration:
    """Parse a duration argument given in seconds.

    Raises:
        DurationParseError: If text is not a finite number
        DurationNegative: If the number is below zero
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        raise DurationParseError() from None

    if not math.isfinite(value):
        raise DurationParseError()

    return duration_from_float(value)


def format_seconds(seconds: float) -> str:
    """Render elapsed seconds as ``<secs>.<mmm>s`` (milliseconds truncated)."""
    # Whole nanoseconds first, then truncate to milliseconds
    nanos = round(seconds * 1_000_000_000)
    whole, rem = divmod(nanos, 1_000_000_000)
    return f"{whole}.{rem // 1_000_000:03d}s"
