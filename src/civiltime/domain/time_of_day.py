"""Time-of-day engine.

A :class:`TimeOfDay` is a count of nanoseconds since midnight. Arithmetic that
crosses midnight reports the whole days crossed as an explicit carry; applying
that carry to a date is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from .errors import InvalidTimeError

__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "TimeOfDay",
    "add_nanos",
    "time",
]

NANOS_PER_MICROSECOND: Final[int] = 1_000
NANOS_PER_MILLISECOND: Final[int] = 1_000_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: Final[int] = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: Final[int] = 24 * NANOS_PER_HOUR

LEAP_SECOND: Final[int] = 60


@dataclass(frozen=True, order=True, slots=True)
class TimeOfDay:
    """Nanoseconds elapsed since midnight, in ``[0, NANOS_PER_DAY)``."""

    MIDNIGHT: ClassVar[TimeOfDay]

    nanos: int

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_DAY:
            raise InvalidTimeError("nanos since midnight", self.nanos)

    @property
    def hour(self) -> int:
        return self.nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return self.nanos // NANOS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self.nanos // NANOS_PER_SECOND % 60

    @property
    def nanosecond(self) -> int:
        return self.nanos % NANOS_PER_SECOND


TimeOfDay.MIDNIGHT = TimeOfDay(0)


def time(hour: int, minute: int, second: int = 0, nanosecond: int = 0) -> TimeOfDay:
    """Validate clock components and build a :class:`TimeOfDay`.

    A ``second`` of 60 is accepted so that leap-second text can be read, and is
    normalized to 59.999999999 of the same minute (whatever ``nanosecond`` is).

    Raises:
        InvalidTimeError: If hour > 23, minute > 59, second > 60,
            nanosecond >= 1e9, or any component is negative.
    """
    if not 0 <= hour <= 23:
        raise InvalidTimeError("hour", hour)
    if not 0 <= minute <= 59:
        raise InvalidTimeError("minute", minute)
    if not 0 <= second <= LEAP_SECOND:
        raise InvalidTimeError("second", second)
    if not 0 <= nanosecond < NANOS_PER_SECOND:
        raise InvalidTimeError("nanosecond", nanosecond)

    if second == LEAP_SECOND:
        second, nanosecond = 59, NANOS_PER_SECOND - 1

    return TimeOfDay(
        hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + nanosecond
    )


def add_nanos(tod: TimeOfDay, nanos: int) -> tuple[TimeOfDay, int]:
    """Add signed ``nanos`` to ``tod``.

    Returns:
        The wrapped time of day and the number of whole days crossed (negative
        when moving backwards past midnight).

    Examples:
        >>> add_nanos(time(23, 0), 2 * NANOS_PER_HOUR)
        (TimeOfDay(nanos=3600000000000), 1)
        >>> add_nanos(time(0, 0), -1)
        (TimeOfDay(nanos=86399999999999), -1)
    """
    day_carry, remainder = divmod(tod.nanos + nanos, NANOS_PER_DAY)
    return TimeOfDay(remainder), day_carry
