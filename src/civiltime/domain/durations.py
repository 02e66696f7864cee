"""Duration and arithmetic engine.

Two kinds of duration exist and they never substitute for each other:

* :class:`ExactDuration` -- elapsed nanoseconds, independent of the calendar.
  Adding one goes through the instant's linear nanosecond form, so exact
  additions are associative and commutative.
* :class:`CalendarDuration` -- years, months and days whose effect depends on
  the date it is applied to. They are applied in that fixed order, clamping the
  day of month after the year step and after the month step::

      2023-01-31 + 1 month          -> 2023-02-28
      2024-02-29 + 1 year, 1 month  -> 2025-03-28

  The time of day and offset are never touched.

Results outside the calendar range raise
:class:`~civiltime.domain.errors.ArithmeticOverflowError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from . import calendar
from .calendar import MAX_YEAR, MIN_YEAR, CivilDate
from .errors import ArithmeticOverflowError
from .instant import Instant, common_reference_nanos
from .time_of_day import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

__all__ = [
    "CalendarDuration",
    "Duration",
    "ExactDuration",
    "add",
    "add_calendar",
    "add_exact",
    "elapsed",
    "subtract",
]

MONTHS_PER_YEAR: Final[int] = 12


@dataclass(frozen=True, order=True, slots=True)
class ExactDuration:
    """A signed span of elapsed nanoseconds."""

    nanoseconds: int

    @classmethod
    def of(  # pylint: disable=too-many-arguments
        cls,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> ExactDuration:
        """Sum the given units into a single exact duration.

        ``days`` here are always 24 hours.
        """
        return cls(
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    def __neg__(self) -> ExactDuration:
        return ExactDuration(-self.nanoseconds)

    def __add__(self, other: object) -> ExactDuration:
        if not isinstance(other, ExactDuration):
            return NotImplemented
        return ExactDuration(self.nanoseconds + other.nanoseconds)

    def __sub__(self, other: object) -> ExactDuration:
        if not isinstance(other, ExactDuration):
            return NotImplemented
        return ExactDuration(self.nanoseconds - other.nanoseconds)


@dataclass(frozen=True, slots=True)
class CalendarDuration:
    """A signed span of calendar units, applied years -> months -> days."""

    years: int = 0
    months: int = 0
    days: int = 0

    def __neg__(self) -> CalendarDuration:
        return CalendarDuration(-self.years, -self.months, -self.days)


type Duration = ExactDuration | CalendarDuration


def add_exact(value: Instant, duration: ExactDuration) -> Instant:
    """Move ``value`` by an exact number of nanoseconds.

    Raises:
        ArithmeticOverflowError: If the result leaves the calendar range.
    """
    return Instant.from_local_nanos(
        value.local_nanos() + duration.nanoseconds, value.offset
    )


def _checked_year(year: int) -> int:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ArithmeticOverflowError(f"year {year}")
    return year


def _clamped(year: int, month: int, day: int) -> CivilDate:
    return CivilDate(year, month, min(day, calendar.days_in_month(year, month)))


def add_calendar(value: Instant, duration: CalendarDuration) -> Instant:
    """Move ``value`` by calendar units: years, then months, then days.

    The day of month is clamped to the length of the target month rather than
    rolling over into the next one.

    Raises:
        ArithmeticOverflowError: If the result leaves the calendar range.
    """
    civil = value.date
    if duration.years:
        civil = _clamped(
            _checked_year(civil.year + duration.years), civil.month, civil.day
        )
    if duration.months:
        year_carry, month_index = divmod(
            civil.month - 1 + duration.months, MONTHS_PER_YEAR
        )
        civil = _clamped(
            _checked_year(civil.year + year_carry), month_index + 1, civil.day
        )
    if duration.days:
        civil = calendar.from_days(calendar.to_days(civil) + duration.days)
    return Instant(civil, value.time, value.offset)


def add(value: Instant, duration: Duration) -> Instant:
    """Apply either kind of duration to ``value``."""
    match duration:
        case ExactDuration():
            return add_exact(value, duration)
        case CalendarDuration():
            return add_calendar(value, duration)
        case _:
            raise TypeError(f"Not a duration: {duration!r}")


def subtract(value: Instant, duration: Duration) -> Instant:
    """Apply the negation of ``duration`` to ``value``."""
    return add(value, -duration)


def elapsed(
    start: Instant, end: Instant, *, assume_offset: int | None = None
) -> ExactDuration:
    """Exact time from ``start`` to ``end`` (negative if ``end`` is earlier).

    Offsets are reconciled the same way as
    :func:`~civiltime.domain.instant.compare_utc`.
    """
    left, right = common_reference_nanos(start, end, assume_offset)
    return ExactDuration(right - left)
