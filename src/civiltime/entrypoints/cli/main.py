"""civiltime CLI entry point.

Defines the top-level ``civiltime`` group (a Click-Extra group, so it gets
``--color``, ``--time`` and ``--version`` for free), sets up logging for the
invocation and registers the subcommands from :mod:`.commands`.

Available commands
- ``civiltime parse``: print the canonical form of a timestamp.
- ``civiltime add``: apply calendar and exact durations.
- ``civiltime compare``: order two timestamps as moments in time.
- ``civiltime info``: weekday, day of year, day count, epoch millis.

Examples
    $ civiltime --version
    $ civiltime parse 2024-02-29T12:00:00.250+01:00 --utc
    $ civiltime add 2023-01-31 --months 1
    $ CIVILTIME_DEFAULT_OFFSET=+02:00 civiltime compare 2024-01-01T09:00:00 2024-01-01T08:30:00Z
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from civiltime import __version__, config
from civiltime.logging import (
    DEFAULT_RECORDER_CAPACITY,
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .commands import CliSettings, add_command, compare_command, info_command, parse_command
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("civiltime", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """civiltime command-line interface.

    civiltime reads and writes ISO-8601-like timestamps on the proleptic
    Gregorian calendar. It normalizes them to a canonical spelling, shifts them
    by calendar units (with month-end clamping) or by exact elapsed time, and
    compares them across UTC offsets without consulting any clock or timezone
    database.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Log more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Log less on the console: -q for ERROR only, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show every record with timestamp, logger name and source location.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="CIVILTIME_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_RECORDER_CAPACITY,
    hidden=True,
    envvar="CIVILTIME_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="CIVILTIME_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer recent DEBUG records regardless of -v/-q and write them to "
        "--log-path as soon as a WARNING is logged. The console is unaffected."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="CIVILTIME_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer at exit when nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="CIVILTIME_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger as NAME=LEVEL (e.g. -L civiltime=DEBUG). "
        "Applies to the console and the flight recorder alike. Repeatable; the "
        "environment variable takes a comma or space separated list."
    ),
)
@clickx.pass_context
def civiltime(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """civiltime command-line interface."""
    settings = LoggingSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        # ctx.color is None unless --color/--no-color was given
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    ctx.call_on_close(logging.shutdown)

    try:
        default_offset = config.get_default_offset()
    except config.InvalidDefaultOffsetError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = CliSettings(default_offset=default_offset)

    log_startup(
        logger,
        settings,
        app_version=__version__,
        handlers=handlers,
        default_offset=default_offset,
    )


civiltime.add_command(parse_command)
civiltime.add_command(add_command)
civiltime.add_command(compare_command)
civiltime.add_command(info_command)
