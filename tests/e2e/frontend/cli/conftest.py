"""Fixtures for the end-to-end logging suite.

A throwaway ``log-demo`` subcommand is attached to the real ``civiltime``
group for the duration of a test. It logs a fixed script of records from a
project logger and from a pretend third-party logger, which lets the tests
observe console verbosity, per-logger levels and the flight recorder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping

import click
import pytest
from click.testing import CliRunner, Result

from civiltime.entrypoints.cli.main import civiltime

# pylint: disable=redefined-outer-name

DEMO_COMMAND = "log-demo"

# (logger, level, message), emitted in this order
DEMO_SCRIPT = (
    ("civiltime.demo", logging.DEBUG, "demo debug"),
    ("civiltime.demo", logging.INFO, "demo info"),
    ("civiltime.demo", logging.WARNING, "demo warning"),
    ("civiltime.demo", logging.ERROR, "demo error"),
    ("civiltime.demo", logging.CRITICAL, "demo critical"),
    ("some.thirdparty", logging.DEBUG, "vendor debug"),
    ("some.thirdparty", logging.INFO, "vendor info"),
    ("some.thirdparty", logging.WARNING, "vendor warning"),
    ("civiltime.demo", logging.DEBUG, "demo trailing debug"),
)


@click.command(DEMO_COMMAND)
def log_demo() -> None:
    """Log every record of DEMO_SCRIPT."""
    for name, level, message in DEMO_SCRIPT:
        logging.getLogger(name).log(level, message)


def _detach(group: click.Group, name: str) -> None:
    # click-extra groups also index commands by help section
    group.commands.pop(name, None)
    sections = list(getattr(group, "_sections", []))
    if (default := getattr(group, "_default_section", None)) is not None:
        sections.append(default)
    for section in sections:
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def cli() -> Iterator[Callable[..., Result]]:
    """Run ``civiltime [ARGS...] log-demo`` in a scratch directory.

    Returns a function taking the global options and an optional ``env``
    mapping. Relative ``--log-path`` values land in the scratch directory,
    which is also the working directory while the test body runs.
    """
    runner = CliRunner()

    def invoke(*args: str, env: Mapping[str, str] | None = None) -> Result:
        return runner.invoke(civiltime, [*args, DEMO_COMMAND], env=env)

    civiltime.add_command(log_demo)
    try:
        with runner.isolated_filesystem():
            yield invoke
    finally:
        _detach(civiltime, DEMO_COMMAND)
