"""Unit tests for the ``-L NAME=LEVEL`` option callback."""

import logging

import click
import pytest

from civiltime.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


def _parse(value):
    # the callback ignores its context and parameter
    return parse_log_level(None, None, value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, {}),
        ((), {}),
        (("civiltime=INFO",), {"civiltime": logging.INFO}),
        # later items win, including over the library defaults
        (
            ("civiltime=INFO", "click_extra=ERROR", "civiltime=WARNING"),
            {"civiltime": logging.WARNING, "click_extra": logging.ERROR},
        ),
        # an environment variable arrives as one string
        (
            "civiltime=INFO,  urllib3=WARNING click_extra=ERROR",
            {
                "civiltime": logging.INFO,
                "urllib3": logging.WARNING,
                "click_extra": logging.ERROR,
            },
        ),
        (("civiltime=debug", "rich=WaRnInG"), {"civiltime": 10, "rich": 30}),
        (("civiltime=15",), {"civiltime": 15}),
    ],
    ids=[
        "none",
        "empty",
        "single",
        "override-order",
        "env-string",
        "case-insensitive",
        "numeric",
    ],
)
def test_levels(value, expected):
    """Parsed items are layered over the library defaults."""
    assert _parse(value) == {**DEFAULT_LIB_LEVELS, **expected}


def test_defaults_not_shared():
    """Each call gets its own mapping."""
    _parse(("click_extra=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"click_extra": logging.WARNING}


@pytest.mark.parametrize(
    ("item", "message"),
    [
        ("not-a-pair", "Expected NAME=LEVEL, got 'not-a-pair'"),
        ("=INFO", "Expected NAME=LEVEL, got '=INFO'"),
        ("civiltime=LOUD", "Invalid log level: LOUD"),
        ("civiltime=", "Invalid log level: "),
    ],
)
def test_rejects(item, message):
    """Malformed items are usage errors naming the problem."""
    with pytest.raises(click.BadParameter) as excinfo:
        _parse((item,))
    assert excinfo.value.message == message
