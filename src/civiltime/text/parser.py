"""Single-pass parser for the timestamp grammar.

Grammar::

    year      = ["+" | "-"] 4DIGIT
    date      = year "-" 2DIGIT "-" 2DIGIT
    time      = 2DIGIT ":" 2DIGIT ":" 2DIGIT ["." 1*9DIGIT]
    offset    = "Z" | ("+" | "-") 2DIGIT ":" 2DIGIT
    datetime  = date ["T" time [offset]]

The scan never backtracks. Each field is validated by the calendar or
time-of-day engine as soon as it has been read, so a well-formed but
impossible value fails at the offset of the field that makes it impossible::

    >>> parse("2023-02-30")
    Traceback (most recent call last):
    ...
    civiltime.domain.errors.ParseError: invalid date at offset 8: '2023-02-30'

Offsets are byte offsets into the input. Input is ASCII; the first non-ASCII
byte met by the scan is reported as an unexpected character.
"""

from __future__ import annotations

from typing import Final, NoReturn

from civiltime.domain import calendar
from civiltime.domain.calendar import CivilDate
from civiltime.domain.errors import (
    InvalidDateError,
    InvalidOffsetError,
    InvalidTimeError,
    ParseError,
    ParseErrorKind,
)
from civiltime.domain.instant import Instant
from civiltime.domain.time_of_day import TimeOfDay, time

__all__ = ["parse", "parse_date", "parse_offset"]

MAX_FRACTION_DIGITS: Final[int] = 9

_SIGNS: Final[dict[str, int]] = {"+": 1, "-": -1}


class _Scanner:
    """Cursor over the input text; every method consumes or fails."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def fail(
        self,
        kind: ParseErrorKind,
        offset: int | None = None,
        cause: Exception | None = None,
    ) -> NoReturn:
        """Raise at ``offset`` (default: the cursor), chaining ``cause``."""
        if offset is None:
            offset = self.pos
            if (found := self.peek()) is not None and not found.isascii():
                kind = ParseErrorKind.UNEXPECTED_CHARACTER
        if cause is None:
            raise ParseError(offset, kind, self.text)
        raise ParseError(offset, kind, self.text) from cause

    def peek(self) -> str | None:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def expect(self, char: str) -> None:
        found = self.peek()
        if found is None:
            self.fail(ParseErrorKind.UNEXPECTED_END)
        if found != char:
            self.fail(ParseErrorKind.UNEXPECTED_CHARACTER)
        self.pos += 1

    def is_digit(self) -> bool:
        found = self.peek()
        return found is not None and "0" <= found <= "9"

    def digits(self, count: int) -> int:
        start = self.pos
        for _ in range(count):
            if self.at_end():
                self.fail(ParseErrorKind.UNEXPECTED_END)
            if not self.is_digit():
                self.fail(ParseErrorKind.EXPECTED_DIGIT)
            self.pos += 1
        return int(self.text[start : self.pos])

    def sign(self) -> int | None:
        found = self.peek()
        if found is not None and found in _SIGNS:
            self.pos += 1
            return _SIGNS[found]
        return None

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def date(self) -> CivilDate:
        year = (self.sign() or 1) * self.digits(4)
        self.expect("-")

        month_at = self.pos
        month = self.digits(2)
        try:
            calendar.days_in_month(year, month)
        except InvalidDateError as err:
            self.fail(ParseErrorKind.INVALID_DATE, month_at, err)
        self.expect("-")

        day_at = self.pos
        day = self.digits(2)
        try:
            return CivilDate(year, month, day)
        except InvalidDateError as err:
            self.fail(ParseErrorKind.INVALID_DATE, day_at, err)

    def _checked_time(self, at: int, *components: int) -> TimeOfDay:
        try:
            return time(*components)
        except InvalidTimeError as err:
            self.fail(ParseErrorKind.INVALID_TIME, at, err)

    def time(self) -> TimeOfDay:
        hour_at = self.pos
        hour = self.digits(2)
        self._checked_time(hour_at, hour, 0)
        self.expect(":")

        minute_at = self.pos
        minute = self.digits(2)
        self._checked_time(minute_at, hour, minute)
        self.expect(":")

        second_at = self.pos
        second = self.digits(2)
        tod = self._checked_time(second_at, hour, minute, second)

        if self.peek() != ".":
            return tod
        self.pos += 1

        fraction_at = self.pos
        if self.at_end():
            self.fail(ParseErrorKind.UNEXPECTED_END)
        if not self.is_digit():
            self.fail(ParseErrorKind.EXPECTED_DIGIT)
        while self.is_digit():
            self.pos += 1
        fraction = self.text[fraction_at : self.pos]
        if len(fraction) > MAX_FRACTION_DIGITS:
            self.fail(
                ParseErrorKind.INVALID_TIME,
                fraction_at + MAX_FRACTION_DIGITS,
                InvalidTimeError("fraction digits", len(fraction)),
            )
        nanosecond = int(fraction.ljust(MAX_FRACTION_DIGITS, "0"))
        return self._checked_time(fraction_at, hour, minute, second, nanosecond)

    def offset(self) -> int:
        if self.peek() == "Z":
            self.pos += 1
            return 0

        if self.at_end():
            self.fail(ParseErrorKind.UNEXPECTED_END)
        if (sign := self.sign()) is None:
            self.fail(ParseErrorKind.UNEXPECTED_CHARACTER)

        hour_at = self.pos
        hours = self.digits(2)
        if hours > 23:
            self.fail(
                ParseErrorKind.INVALID_OFFSET, hour_at, InvalidOffsetError(sign * hours * 60)
            )
        self.expect(":")

        minute_at = self.pos
        minutes = self.digits(2)
        if minutes > 59:
            self.fail(
                ParseErrorKind.INVALID_OFFSET,
                minute_at,
                InvalidOffsetError(sign * (hours * 60 + minutes)),
            )
        return sign * (hours * 60 + minutes)

    def finish(self) -> None:
        if not self.at_end():
            self.fail(ParseErrorKind.TRAILING_INPUT)


def _as_text(text: str | bytes) -> str:
    # latin-1 maps each byte to one character, so offsets stay byte offsets;
    # anything above 0x7f is then rejected by the scan like any other stray char.
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text).decode("latin-1")
    return text


def parse(text: str | bytes) -> Instant:
    """Parse a date or date-time into an :class:`Instant`.

    A date-only input yields midnight with no offset.

    Raises:
        ParseError: With the byte offset and kind of the first failure.
    """
    scanner = _Scanner(_as_text(text))
    civil = scanner.date()
    if scanner.at_end():
        return Instant(civil)

    if scanner.peek() != "T":
        scanner.fail(ParseErrorKind.TRAILING_INPUT)
    scanner.pos += 1
    tod = scanner.time()

    offset = None
    if not scanner.at_end() and scanner.peek() in ("Z", *_SIGNS):
        offset = scanner.offset()
    scanner.finish()
    return Instant(civil, tod, offset)


def parse_date(text: str | bytes) -> CivilDate:
    """Parse the ``date`` production alone."""
    scanner = _Scanner(_as_text(text))
    civil = scanner.date()
    scanner.finish()
    return civil


def parse_offset(text: str | bytes) -> int:
    """Parse the ``offset`` production alone, returning minutes east of UTC."""
    scanner = _Scanner(_as_text(text))
    minutes = scanner.offset()
    scanner.finish()
    return minutes
