"""Proleptic Gregorian calendar engine.

Converts between civil ``(year, month, day)`` triples and a linear day count
relative to the Unix epoch (1970-01-01 is day 0). The Gregorian leap-year rule
is applied to every year, including year 0 and negative years; there is no
Julian switch-over.

The conversion is exact in both directions over ``MIN_DAY..MAX_DAY``:

    >>> to_days(date(1970, 1, 1))
    0
    >>> from_days(-1)
    CivilDate(year=1969, month=12, day=31)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from .errors import ArithmeticOverflowError, InvalidDateError

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_DAY",
    "MAX_DAY",
    "CivilDate",
    "Weekday",
    "date",
    "day_of_week",
    "day_of_year",
    "days_before_month",
    "days_in_month",
    "from_days",
    "is_leap_year",
    "to_days",
    "year_size",
]

MIN_YEAR: Final[int] = -9999
MAX_YEAR: Final[int] = 9999

DAYS_PER_NORMAL_YEAR: Final[int] = 365
DAYS_PER_LEAP_YEAR: Final[int] = 366
DAYS_PER_WEEK: Final[int] = 7

# Full Gregorian cycles
_DAYS_PER_400_YEARS: Final[int] = 146_097
_DAYS_PER_100_YEARS: Final[int] = 36_524
_DAYS_PER_4_YEARS: Final[int] = 1_461

# Ordinal of 1970-01-01 when 0001-01-01 is ordinal 1.
_UNIX_EPOCH_ORDINAL: Final[int] = 719_163

# Days before the first of each month; index 12 is the year length.
_DAYS_BEFORE_MONTH: Final[tuple[tuple[int, ...], tuple[int, ...]]] = (
    # Normal years
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    # Leap years
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday as in C's ``tm_wday``."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# 1970-01-01 was a Thursday.
EPOCH_WEEKDAY: Final[Weekday] = Weekday.THURSDAY


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_size(year: int) -> int:
    """Number of days in ``year`` (365 or 366)."""
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_NORMAL_YEAR


def _check_month(year: int, month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(year, month, day, "month")


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, accounting for leap Februaries.

    Raises:
        InvalidDateError: If ``month`` is outside 1..12.
    """
    _check_month(year, month, 1)
    table = _DAYS_BEFORE_MONTH[is_leap_year(year)]
    return table[month] - table[month - 1]


def days_before_month(year: int, month: int) -> int:
    """Number of days in ``year`` preceding the first day of ``month``."""
    _check_month(year, month, 1)
    return _DAYS_BEFORE_MONTH[is_leap_year(year)][month - 1]


def _days_before_year(year: int) -> int:
    # Floor division keeps this exact for year 0 and negative years.
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _ordinal(year: int, month: int, day: int) -> int:
    return _days_before_year(year) + days_before_month(year, month) + day


MIN_DAY: Final[int] = _ordinal(MIN_YEAR, 1, 1) - _UNIX_EPOCH_ORDINAL
MAX_DAY: Final[int] = _ordinal(MAX_YEAR, 12, 31) - _UNIX_EPOCH_ORDINAL


@dataclass(frozen=True, order=True, slots=True)
class CivilDate:
    """A validated (year, month, day) triple.

    Field order makes the dataclass ordering chronological.

    Raises:
        InvalidDateError: If the triple does not name a representable date.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidDateError(self.year, self.month, self.day, "year")
        _check_month(self.year, self.month, self.day)
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise InvalidDateError(self.year, self.month, self.day, "day")

    @classmethod
    def from_days(cls, days: int) -> CivilDate:
        """Build a date from a day count; see :func:`from_days`."""
        return from_days(days)

    def to_days(self) -> int:
        """Day count of this date; see :func:`to_days`."""
        return to_days(self)

    @property
    def day_of_week(self) -> Weekday:
        """Weekday of this date."""
        return day_of_week(self)

    @property
    def day_of_year(self) -> int:
        """0-based position of this date within its year."""
        return day_of_year(self)


def date(year: int, month: int, day: int) -> CivilDate:
    """Validate and build a :class:`CivilDate`.

    Raises:
        InvalidDateError: If month is outside 1..12, day exceeds the month
            length, or year is outside ``MIN_YEAR..MAX_YEAR``.
    """
    return CivilDate(year, month, day)


def to_days(civil: CivilDate) -> int:
    """Return the number of days between 1970-01-01 and ``civil``."""
    return _ordinal(civil.year, civil.month, civil.day) - _UNIX_EPOCH_ORDINAL


def from_days(days: int) -> CivilDate:
    """Return the civil date ``days`` days after 1970-01-01.

    Raises:
        ArithmeticOverflowError: If ``days`` is outside ``MIN_DAY..MAX_DAY``.
    """
    if not MIN_DAY <= days <= MAX_DAY:
        raise ArithmeticOverflowError(f"day count {days}")

    n400, rem = divmod(days + _UNIX_EPOCH_ORDINAL - 1, _DAYS_PER_400_YEARS)
    n100, rem = divmod(rem, _DAYS_PER_100_YEARS)
    n4, rem = divmod(rem, _DAYS_PER_4_YEARS)
    n1, rem = divmod(rem, DAYS_PER_NORMAL_YEAR)
    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return CivilDate(year - 1, 12, 31)

    cumulative = _DAYS_BEFORE_MONTH[is_leap_year(year)]
    month = 12
    while rem < cumulative[month - 1]:
        month -= 1
    return CivilDate(year, month, rem - cumulative[month - 1] + 1)


def day_of_week(civil: CivilDate) -> Weekday:
    """Weekday of ``civil``, anchored on the epoch being a Thursday."""
    return Weekday((to_days(civil) + EPOCH_WEEKDAY) % DAYS_PER_WEEK)


def day_of_year(civil: CivilDate) -> int:
    """Days elapsed since January 1st of the same year (0..365).

    Like :class:`Weekday`, the count starts at zero: January 1st is day 0.
    """
    return days_before_month(civil.year, civil.month) + civil.day - 1
