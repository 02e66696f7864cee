"""Domain-layer error definitions."""

from __future__ import annotations

from enum import Enum

# ============================================================================
#                           General domain errors
# ============================================================================


class CivilTimeError(Exception):
    """Base class for all civiltime errors."""


class ArithmeticOverflowError(CivilTimeError, OverflowError):
    """Raised when a result falls outside the representable day range."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Result out of range: {detail}")
        self.detail = detail


# ============================================================================
#                     Calendar / time-of-day validation
# ============================================================================


class InvalidDateError(CivilTimeError, ValueError):
    """Raised when (year, month, day) does not name a civil date."""

    def __init__(self, year: int, month: int, day: int, field: str) -> None:
        super().__init__(f"Invalid date {year}-{month}-{day}: bad {field}.")
        self.year = year
        self.month = month
        self.day = day
        self.field = field


class InvalidTimeError(CivilTimeError, ValueError):
    """Raised when a time-of-day component is out of range."""

    def __init__(self, field: str, value: int) -> None:
        super().__init__(f"Invalid time: {field} {value} is out of range.")
        self.field = field
        self.value = value


class InvalidOffsetError(CivilTimeError, ValueError):
    """Raised when a UTC offset exceeds +/-23:59."""

    def __init__(self, minutes: int) -> None:
        super().__init__(f"Invalid UTC offset: {minutes} minutes.")
        self.minutes = minutes


# ============================================================================
#                               Comparison
# ============================================================================


class MixedOffsetComparisonError(CivilTimeError, TypeError):
    """Raised when instants with different UTC offsets are ordered directly."""

    def __init__(self, left: int | None, right: int | None) -> None:
        super().__init__(
            f"Cannot order instants with offsets {left!r} and {right!r}; "
            "use compare_utc()."
        )
        self.left = left
        self.right = right


class NaiveInstantError(CivilTimeError, ValueError):
    """Raised when a local instant is used where a UTC reference is needed."""

    def __init__(self) -> None:
        super().__init__(
            "Instant has no UTC offset; pass assume_offset to read it as zoned."
        )


# ============================================================================
#                                Text
# ============================================================================


class ParseErrorKind(Enum):
    """What went wrong at the failing byte of a parse."""

    UNEXPECTED_END = "unexpected end of input"
    UNEXPECTED_CHARACTER = "unexpected character"
    EXPECTED_DIGIT = "expected digit"
    INVALID_DATE = "invalid date"
    INVALID_TIME = "invalid time"
    INVALID_OFFSET = "invalid offset"
    TRAILING_INPUT = "trailing input"


class ParseError(CivilTimeError, ValueError):
    """Raised when text does not match the timestamp grammar.

    Semantic failures (an impossible date, time or offset) keep the original
    error as ``__cause__``; ``kind`` names the same failure.
    """

    def __init__(self, offset: int, kind: ParseErrorKind, text: str = "") -> None:
        super().__init__(f"{kind.value} at offset {offset}: {text!r}")
        self.offset = offset
        self.kind = kind
        self.text = text

    @property
    def cause(self) -> CivilTimeError | None:
        """The calendar/time error this parse failure annotates, if any."""
        cause = self.__cause__
        return cause if isinstance(cause, CivilTimeError) else None
