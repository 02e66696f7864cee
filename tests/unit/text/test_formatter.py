"""Unit tests for canonical formatting."""

import pytest

from civiltime.domain.calendar import date
from civiltime.domain.errors import ParseError
from civiltime.domain.instant import Instant
from civiltime.domain.time_of_day import time
from civiltime.text import canonical_form, format, format_date, format_offset, format_time

# pylint: disable=redefined-builtin


@pytest.mark.parametrize(
    ("year", "expected"),
    [(2023, "2023-03-15"), (44, "0044-03-15"), (0, "0000-03-15"), (-44, "-0044-03-15")],
)
def test_format_date(year: int, expected: str) -> None:
    """Years are four digits, with a minus sign before the year only."""
    assert format_date(date(year, 3, 15)) == expected


@pytest.mark.parametrize(
    ("nanosecond", "expected"),
    [
        (0, "07:05:09"),
        (500_000_000, "07:05:09.5"),
        (23_000_000, "07:05:09.023"),
        (1, "07:05:09.000000001"),
        (123_456_789, "07:05:09.123456789"),
    ],
)
def test_format_time(nanosecond: int, expected: str) -> None:
    """The fraction appears only when non-zero, with trailing zeros trimmed."""
    assert format_time(time(7, 5, 9, nanosecond)) == expected


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(0, "Z"), (330, "+05:30"), (-330, "-05:30"), (1, "+00:01"), (-1439, "-23:59")],
)
def test_format_offset(minutes: int, expected: str) -> None:
    """Zero is Z; anything else is a signed HH:MM."""
    assert format_offset(minutes) == expected


def test_format_instant() -> None:
    """Date, T, time and offset concatenate."""
    value = Instant(date(2023, 12, 31), time(23, 59, 59, 500_000_000), 330)
    assert format(value) == "2023-12-31T23:59:59.5+05:30"


def test_format_local_instant() -> None:
    """Local instants have no offset suffix."""
    assert format(Instant(date(2023, 1, 5), time(10, 0))) == "2023-01-05T10:00:00"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2023-01-05", "2023-01-05T00:00:00"),
        ("+2023-01-05T10:00:00.120000000-00:00", "2023-01-05T10:00:00.12Z"),
        ("2023-01-05T10:00:00.000+00:00", "2023-01-05T10:00:00Z"),
        ("2016-12-31T23:59:60Z", "2016-12-31T23:59:59.999999999Z"),
        ("1983-09-23T12:00:21.023Z", "1983-09-23T12:00:21.023Z"),
    ],
)
def test_canonical_form(text: str, expected: str) -> None:
    """Equivalent spellings share one canonical form."""
    assert canonical_form(text) == expected
    assert canonical_form(expected) == expected


def test_canonical_form_propagates_parse_errors() -> None:
    """Invalid text raises instead of being rendered."""
    with pytest.raises(ParseError):
        canonical_form("2023-02-30")
