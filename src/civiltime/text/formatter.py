"""Canonical text rendering, the structural inverse of :mod:`.parser`."""

from __future__ import annotations

from civiltime.domain.calendar import CivilDate
from civiltime.domain.instant import Instant
from civiltime.domain.time_of_day import TimeOfDay

from .parser import parse

__all__ = ["canonical_form", "format", "format_date", "format_offset", "format_time"]

# pylint: disable=redefined-builtin


def format_date(value: CivilDate) -> str:
    """``YYYY-MM-DD``, with a leading ``-`` for negative years."""
    year = f"-{-value.year:04d}" if value.year < 0 else f"{value.year:04d}"
    return f"{year}-{value.month:02d}-{value.day:02d}"


def format_time(value: TimeOfDay) -> str:
    """``HH:MM:SS`` plus a fraction, trailing zeros trimmed, when non-zero."""
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.nanosecond:
        text += "." + f"{value.nanosecond:09d}".rstrip("0")
    return text


def format_offset(minutes: int) -> str:
    """``Z`` for zero, ``+HH:MM`` / ``-HH:MM`` otherwise."""
    if minutes == 0:
        return "Z"
    sign = "+" if minutes > 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format(value: Instant) -> str:
    """Render ``value`` in canonical form.

    Examples:
        >>> from civiltime.domain.calendar import date
        >>> from civiltime.domain.time_of_day import time
        >>> format(Instant(date(2023, 12, 31), time(23, 59, 59, 500_000_000), 330))
        '2023-12-31T23:59:59.5+05:30'
    """
    text = f"{format_date(value.date)}T{format_time(value.time)}"
    if value.offset is not None:
        text += format_offset(value.offset)
    return text


def canonical_form(text: str | bytes) -> str:
    """Canonical spelling of any valid timestamp text.

    Raises:
        ParseError: If ``text`` does not parse.
    """
    return format(parse(text))
