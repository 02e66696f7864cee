"""civiltime subcommands: parse, add, compare, info.

Results are printed to **stdout**, one value per line, so they can be piped.
Diagnostics go to stderr. Failures (unparseable text, out-of-range results,
offset mix-ups) exit with status 1 and a message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Any

import click

from civiltime.domain import calendar
from civiltime.domain.durations import CalendarDuration, ExactDuration, add
from civiltime.domain.errors import CivilTimeError, MixedOffsetComparisonError
from civiltime.domain.instant import compare_utc
from civiltime.text import format  # pylint: disable=redefined-builtin

from .helpers import parse_offset_option, parse_or_fail, warn

if TYPE_CHECKING:
    from collections.abc import Callable

    from civiltime.domain.instant import Instant

logger = logging.getLogger(__name__)

NAIVE_INSTANT_MSG = (
    "{text!r} has no UTC offset.\n"
    "Pass --assume-offset (e.g. --assume-offset +02:00) or set "
    "CIVILTIME_DEFAULT_OFFSET."
)

COMPARISON_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@dataclass
class CliSettings:
    """Values resolved by the top-level group and shared with subcommands."""

    default_offset: int | None = None


def _assumed_offset(ctx: click.Context, explicit: int | None) -> int | None:
    if explicit is not None:
        return explicit
    return ctx.ensure_object(CliSettings).default_offset


def _domain_errors_as_click(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn library errors escaping a command into a clean exit-1 message."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CivilTimeError as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e

    return wrapper


assume_offset_option = click.option(
    "--assume-offset",
    metavar="OFFSET",
    callback=parse_offset_option,
    default=None,
    help=(
        "Offset used to read timestamps that carry none (e.g. Z, +05:30). "
        "Defaults to CIVILTIME_DEFAULT_OFFSET."
    ),
)


@click.command("parse")
@click.argument("text")
@click.option("--utc", is_flag=True, help="Convert to UTC before printing.")
@assume_offset_option
@click.pass_context
@_domain_errors_as_click
def parse_command(
    ctx: click.Context, text: str, utc: bool, assume_offset: int | None
) -> None:
    """Parse TEXT and print its canonical form."""
    value = parse_or_fail(text)
    logger.debug("Parsed %r as %r", text, value)
    if utc:
        if value.offset is None:
            if (offset := _assumed_offset(ctx, assume_offset)) is None:
                raise click.ClickException(NAIVE_INSTANT_MSG.format(text=text))
            value = value.replace_offset(offset)
        value = value.to_utc()
    click.echo(format(value))


@click.command("add")
@click.argument("text")
@click.option("--years", type=int, default=0, help="Calendar years to add.")
@click.option("--months", type=int, default=0, help="Calendar months to add.")
@click.option("--days", type=int, default=0, help="Calendar days to add.")
@click.option("--hours", type=int, default=0, help="Exact hours to add.")
@click.option("--minutes", type=int, default=0, help="Exact minutes to add.")
@click.option("--seconds", type=int, default=0, help="Exact seconds to add.")
@click.option(
    "--nanoseconds", type=int, default=0, help="Exact nanoseconds to add."
)
@click.option(
    "--subtract", is_flag=True, help="Subtract the durations instead of adding."
)
@_domain_errors_as_click
def add_command(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    text: str,
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanoseconds: int,
    subtract: bool,
) -> None:
    """Add durations to TEXT and print the result.

    The calendar part (years, then months, then days) is applied first and
    clamps the day of month; the exact part (hours, minutes, seconds,
    nanoseconds) is applied to that result.
    """
    source = parse_or_fail(text)
    sign = -1 if subtract else 1
    calendar_part = CalendarDuration(sign * years, sign * months, sign * days)
    exact_part = ExactDuration.of(
        hours=sign * hours,
        minutes=sign * minutes,
        seconds=sign * seconds,
        nanoseconds=sign * nanoseconds,
    )
    logger.debug("Applying %r then %r to %r", calendar_part, exact_part, source)

    shifted = add(source, calendar_part)
    if (years or months) and not days and shifted.day != source.day:
        warn(f"Day of month clamped from {source.day} to {shifted.day}.")
    click.echo(format(add(shifted, exact_part)))


@click.command("compare")
@click.argument("first")
@click.argument("second")
@assume_offset_option
@click.pass_context
@_domain_errors_as_click
def compare_command(
    ctx: click.Context, first: str, second: str, assume_offset: int | None
) -> None:
    """Print <, = or > as FIRST is before, at, or after SECOND.

    Timestamps are compared as moments in time, after conversion to UTC.
    """
    a, b = parse_or_fail(first), parse_or_fail(second)
    try:
        result = compare_utc(a, b, assume_offset=_assumed_offset(ctx, assume_offset))
    except MixedOffsetComparisonError as e:
        naive = first if a.offset is None else second
        raise click.ClickException(NAIVE_INSTANT_MSG.format(text=naive)) from e
    click.echo(COMPARISON_SYMBOLS[result])


def _describe(value: Instant) -> list[tuple[str, str]]:
    return [
        ("canonical", format(value)),
        ("day-count", str(calendar.to_days(value.date))),
        ("weekday", value.day_of_week.name.capitalize()),
        ("day-of-year", str(value.day_of_year)),
        ("leap-year", "yes" if calendar.is_leap_year(value.year) else "no"),
        ("epoch-millis", str(value.epoch_millis())),
        ("zoned", "no" if value.offset is None else "yes"),
    ]


@click.command("info")
@click.argument("text")
@_domain_errors_as_click
def info_command(text: str) -> None:
    """Print calendar facts about TEXT."""
    value = parse_or_fail(text)
    for key, field_value in _describe(value):
        click.echo(f"{key}: {field_value}")
