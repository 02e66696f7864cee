"""Click helpers that turn command-line text into civiltime values."""

from __future__ import annotations

import click

from civiltime.domain.errors import ParseError
from civiltime.domain.instant import Instant
from civiltime.text import parse, parse_offset

from .messages import describe_parse_error


def parse_or_fail(text: str) -> Instant:
    """Parse ``text`` or abort the command with a caret diagnostic (exit code 1)."""
    try:
        return parse(text)
    except ParseError as e:
        raise click.ClickException(describe_parse_error(e)) from e


def parse_offset_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | None,
) -> int | None:
    """Click callback reading ``Z``, ``+HH:MM`` or ``-HH:MM`` as minutes east of UTC.

    Raises:
        click.BadParameter: If the value is not an offset.
    """
    if value is None:
        return None
    try:
        return parse_offset(value)
    except ParseError as e:
        raise click.BadParameter(describe_parse_error(e)) from e
