"""Logging setup for the civiltime CLI.

Console output goes through Rich on stderr so that stdout only ever carries
command results. Independently of console verbosity, a "flight recorder"
keeps recent DEBUG records in memory and dumps them to a log file once a
WARNING is seen (or at exit when forced), which makes a failed invocation
reproducible after the fact.

The library packages (:mod:`civiltime.domain`, :mod:`civiltime.text`) never
configure logging themselves; only :func:`configure_logging` does.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Final, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_LOGGER: Final = "civiltime"

BASE_LEVEL: Final = logging.WARNING
DEFAULT_RECORDER_CAPACITY: Final = 2000

CONSOLE_FORMAT: Final = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT: Final = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT: Final = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# Distributions whose versions appear in the startup diagnostics
REPORTED_DISTRIBUTIONS: Final = ("click", "click-extra", "rich", "platformdirs")

# Matches click-extra's --color / --no-color handling
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI decided about logging for one invocation.

    Attributes:
        level: Minimum console level.
        debug: Developer formatting (timestamps, logger names, source paths).
        color: Whether the console may use color.
        log_path: Where the flight recorder writes, or None to disable it.
        recorder_capacity: Records buffered by the flight recorder.
        flush_on_close: Dump the flight recorder at exit even without a WARNING.
        logger_levels: Per-logger minimum levels, applied to every handler.
    """

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = DEFAULT_RECORDER_CAPACITY
    flush_on_close: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        """True when records are also buffered for the log file."""
        return self.log_path is not None


def verbosity_level(verbose: int, quiet: int) -> int:
    """Console level after ``-v``/``-q`` repetitions, one level per flag.

    Clamped to the DEBUG..CRITICAL range::

        >>> logging.getLevelName(verbosity_level(1, 0))
        'INFO'
        >>> logging.getLevelName(verbosity_level(0, 5))
        'CRITICAL'
    """
    level = BASE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class LoggerOriginFilter(logging.Filter):
    """Tag records with where they came from.

    Records from outside the project get ``record.origin`` set to the top
    level package in brackets (``click_extra.colorize`` becomes
    ``[click_extra]``); project records get an empty origin. Nothing is
    filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.origin = "" if top == PROJECT_LOGGER else f"[{top}]"
        return True


def console_handler(
    level: int = BASE_LEVEL, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich handler that writes log records to stderr.

    In debug mode every record is shown with its timestamp, logger name and a
    source link; otherwise records carry their origin tag only.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LoggerOriginFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = DEFAULT_RECORDER_CAPACITY,
    *,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer up to ``capacity`` records and write them to ``path`` on demand.

    The buffer is written when a record at ``flush_level`` or above arrives,
    when it fills up, and at close if ``flush_on_close`` is set. The file is
    truncated when the handler is created, so it only ever holds the latest
    invocation.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler and (optionally) the flight recorder.

    The root logger passes everything through and the handlers do the
    filtering; per-logger levels in ``settings.logger_levels`` then narrow
    individual loggers for all handlers at once. Any previous root
    configuration is replaced.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[Handler] = [
        console_handler(settings.level, debug=settings.debug, color=settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(
                settings.log_path,
                settings.recorder_capacity,
                flush_on_close=settings.flush_on_close,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def _describe_offset(minutes: int | None) -> str:
    return "<none>" if minutes is None else f"{minutes} min"


def _diagnostics(
    settings: LoggingSettings,
    handlers: list[Handler],
    default_offset: int | None,
) -> Iterator[tuple[str, object]]:
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    for name in REPORTED_DISTRIBUTIONS:
        yield name, _distribution_version(name)
    yield "Handlers", [type(h).__name__ for h in handlers]
    if settings.flight_recorder:
        yield "Flight recorder", (
            f"path={settings.log_path}, capacity={settings.recorder_capacity}, "
            f"flush_on_close={settings.flush_on_close}"
        )
    yield "Default offset", _describe_offset(default_offset)
    yield "Per-logger overrides", (
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>"
    )


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    *,
    app_version: str,
    handlers: list[Handler],
    default_offset: int | None,
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The diagnostics (interpreter, platform, library versions, handler setup,
    the default UTC offset and per-logger levels) mostly matter in the flight
    recorder file, which sees DEBUG regardless of console verbosity.
    """
    logger.info(
        "civiltime %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )
    for label, value in _diagnostics(settings, handlers, default_offset):
        logger.debug("%s: %s", label, value)
