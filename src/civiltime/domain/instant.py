"""Instant model: a civil date, a time of day and an optional UTC offset.

Instants without an offset are *local* (naive) and only order against other
local instants. Zoned instants order directly only against instants with the
same offset; :func:`compare_utc` is the explicit way to compare across offsets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from . import calendar
from .calendar import CivilDate, Weekday
from .errors import InvalidOffsetError, MixedOffsetComparisonError, NaiveInstantError
from .time_of_day import (
    NANOS_PER_DAY,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    TimeOfDay,
)

if TYPE_CHECKING:
    from .durations import Duration, ExactDuration

__all__ = [
    "MAX_OFFSET_MINUTES",
    "Instant",
    "compare_utc",
    "instant",
    "normalize",
]

MAX_OFFSET_MINUTES: Final[int] = 23 * 60 + 59


@dataclass(frozen=True, slots=True)
class Instant:
    """A normalized point on the civil time line.

    Attributes:
        date: The civil date.
        time: The time of day on ``date``.
        offset: Minutes east of UTC, or ``None`` for a local instant.
    """

    date: CivilDate
    time: TimeOfDay = field(default=TimeOfDay.MIDNIGHT)
    offset: int | None = None

    def __post_init__(self) -> None:
        if self.offset is not None and abs(self.offset) > MAX_OFFSET_MINUTES:
            raise InvalidOffsetError(self.offset)

    # ------------------------------------------------------------------
    # Linear forms
    # ------------------------------------------------------------------

    def local_nanos(self) -> int:
        """Nanoseconds since 1970-01-01T00:00 of the local representation."""
        return calendar.to_days(self.date) * NANOS_PER_DAY + self.time.nanos

    def epoch_nanos(self) -> int:
        """Nanoseconds since the Unix epoch.

        Zoned instants are measured from 1970-01-01T00:00Z; local instants
        from local midnight of 1970-01-01.
        """
        return self.local_nanos() - (self.offset or 0) * NANOS_PER_MINUTE

    def epoch_millis(self) -> int:
        """Milliseconds since the Unix epoch, rounded towards the past."""
        return self.epoch_nanos() // NANOS_PER_MILLISECOND

    @classmethod
    def from_local_nanos(cls, nanos: int, offset: int | None = None) -> Instant:
        """Build an instant from a linear local nanosecond count.

        Raises:
            ArithmeticOverflowError: If the day falls outside the calendar range.
        """
        days, remainder = divmod(nanos, NANOS_PER_DAY)
        return cls(calendar.from_days(days), TimeOfDay(remainder), offset)

    @classmethod
    def from_epoch_nanos(cls, nanos: int, offset: int | None = None) -> Instant:
        """Build an instant ``nanos`` after the epoch, shown at ``offset``."""
        return cls.from_local_nanos(nanos + (offset or 0) * NANOS_PER_MINUTE, offset)

    @classmethod
    def from_epoch_millis(cls, millis: int, offset: int | None = None) -> Instant:
        """Build an instant ``millis`` milliseconds after the epoch."""
        return cls.from_epoch_nanos(millis * NANOS_PER_MILLISECOND, offset)

    # ------------------------------------------------------------------
    # Offset handling
    # ------------------------------------------------------------------

    def with_offset(self, offset: int) -> Instant:
        """Same moment, expressed at another UTC offset.

        Raises:
            NaiveInstantError: If this instant has no offset to convert from.
        """
        if self.offset is None:
            raise NaiveInstantError()
        return Instant.from_epoch_nanos(self.epoch_nanos(), _checked_offset(offset))

    def to_utc(self) -> Instant:
        """Same moment, expressed at offset zero."""
        return self.with_offset(0)

    def replace_offset(self, offset: int | None) -> Instant:
        """Same local fields, different (or no) offset."""
        return Instant(self.date, self.time, offset)

    # ------------------------------------------------------------------
    # Field accessors
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def second(self) -> int:
        return self.time.second

    @property
    def nanosecond(self) -> int:
        return self.time.nanosecond

    @property
    def day_of_week(self) -> Weekday:
        return calendar.day_of_week(self.date)

    @property
    def day_of_year(self) -> int:
        return calendar.day_of_year(self.date)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _ordering_key(self, other: Instant) -> tuple[int, int]:
        if self.offset != other.offset:
            raise MixedOffsetComparisonError(self.offset, other.offset)
        return calendar.to_days(self.date), self.time.nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordering_key(other) < other._ordering_key(self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordering_key(other) <= other._ordering_key(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordering_key(other) > other._ordering_key(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ordering_key(other) >= other._ordering_key(self)

    # ------------------------------------------------------------------
    # Arithmetic operators (see civiltime.domain.durations)
    # ------------------------------------------------------------------

    def __add__(self, duration: Duration) -> Instant:
        from .durations import CalendarDuration, ExactDuration, add

        if not isinstance(duration, (ExactDuration, CalendarDuration)):
            return NotImplemented
        return add(self, duration)

    def __sub__(self, other: Duration | Instant) -> Instant | ExactDuration:
        from .durations import CalendarDuration, ExactDuration, elapsed, subtract

        if isinstance(other, Instant):
            return elapsed(other, self)
        if not isinstance(other, (ExactDuration, CalendarDuration)):
            return NotImplemented
        return subtract(self, other)


def _checked_offset(offset: int | None) -> int | None:
    if offset is not None and abs(offset) > MAX_OFFSET_MINUTES:
        raise InvalidOffsetError(offset)
    return offset


def instant(
    date: CivilDate, time: TimeOfDay = TimeOfDay.MIDNIGHT, offset: int | None = None
) -> Instant:
    """Build an :class:`Instant`.

    Raises:
        InvalidOffsetError: If ``offset`` exceeds +/-23:59.
    """
    return Instant(date, time, offset)


def normalize(
    date: CivilDate, time: TimeOfDay, day_carry: int, offset: int | None = None
) -> Instant:
    """Fold a day carry produced by time-of-day arithmetic into the date.

    Raises:
        ArithmeticOverflowError: If the carried date is out of range.
    """
    if day_carry:
        date = calendar.from_days(calendar.to_days(date) + day_carry)
    return Instant(date, time, offset)


def utc_nanos(value: Instant, assume_offset: int | None = None) -> int:
    """Nanoseconds since 1970-01-01T00:00Z.

    Local instants are read at ``assume_offset``.

    Raises:
        NaiveInstantError: If ``value`` is local and no offset is assumed.
    """
    offset = value.offset if value.offset is not None else assume_offset
    if offset is None:
        raise NaiveInstantError()
    return value.local_nanos() - _checked_offset(offset) * NANOS_PER_MINUTE


def compare_utc(a: Instant, b: Instant, *, assume_offset: int | None = None) -> int:
    """Compare two instants as moments in time.

    Both sides are converted to UTC first. Local instants are read at
    ``assume_offset``; two local instants compare by their local fields.

    Returns:
        -1, 0 or 1 as ``a`` is before, simultaneous with, or after ``b``.

    Raises:
        MixedOffsetComparisonError: If one side is local, the other zoned and
            no ``assume_offset`` was given.
    """
    left, right = common_reference_nanos(a, b, assume_offset)
    return (left > right) - (left < right)


def common_reference_nanos(
    a: Instant, b: Instant, assume_offset: int | None = None
) -> tuple[int, int]:
    """Linear nanosecond forms of ``a`` and ``b`` on a shared reference.

    Two local instants share their local clock; otherwise both are read as UTC.

    Raises:
        MixedOffsetComparisonError: If local and zoned instants are mixed and
            no ``assume_offset`` was given.
    """
    if a.offset is None and b.offset is None:
        return a.local_nanos(), b.local_nanos()
    if assume_offset is None and (a.offset is None or b.offset is None):
        raise MixedOffsetComparisonError(a.offset, b.offset)
    return utc_nanos(a, assume_offset), utc_nanos(b, assume_offset)
