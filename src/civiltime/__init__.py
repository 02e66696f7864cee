"""civiltime

A proleptic Gregorian date/time library: civil-calendar arithmetic, exact and
calendar durations, and parsing/formatting of ISO-8601-like timestamps.
All values are immutable and every operation is a pure function.
"""

from civiltime.domain.calendar import (
    MAX_DAY,
    MAX_YEAR,
    MIN_DAY,
    MIN_YEAR,
    CivilDate,
    Weekday,
    date,
    day_of_week,
    day_of_year,
    days_in_month,
    from_days,
    is_leap_year,
    to_days,
)
from civiltime.domain.durations import (
    CalendarDuration,
    Duration,
    ExactDuration,
    add,
    add_calendar,
    add_exact,
    elapsed,
    subtract,
)
from civiltime.domain.errors import (
    ArithmeticOverflowError,
    CivilTimeError,
    InvalidDateError,
    InvalidOffsetError,
    InvalidTimeError,
    MixedOffsetComparisonError,
    NaiveInstantError,
    ParseError,
    ParseErrorKind,
)
from civiltime.domain.instant import Instant, compare_utc, instant, normalize
from civiltime.domain.time_of_day import TimeOfDay, add_nanos, time
from civiltime.text import canonical_form, format, parse  # pylint: disable=redefined-builtin

__all__ = [
    "__version__",
    # Calendar
    "MAX_DAY",
    "MAX_YEAR",
    "MIN_DAY",
    "MIN_YEAR",
    "CivilDate",
    "Weekday",
    "date",
    "day_of_week",
    "day_of_year",
    "days_in_month",
    "from_days",
    "is_leap_year",
    "to_days",
    # Time of day
    "TimeOfDay",
    "add_nanos",
    "time",
    # Instant
    "Instant",
    "compare_utc",
    "instant",
    "normalize",
    # Durations
    "CalendarDuration",
    "Duration",
    "ExactDuration",
    "add",
    "add_calendar",
    "add_exact",
    "elapsed",
    "subtract",
    # Text
    "canonical_form",
    "format",
    "parse",
    # Errors
    "ArithmeticOverflowError",
    "CivilTimeError",
    "InvalidDateError",
    "InvalidOffsetError",
    "InvalidTimeError",
    "MixedOffsetComparisonError",
    "NaiveInstantError",
    "ParseError",
    "ParseErrorKind",
]
__version__ = "0.1.0"
