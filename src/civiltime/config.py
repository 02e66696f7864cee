"""Configuration utilities for civiltime.

The library core never reads ambient state; the offset used to interpret local
instants is always passed in explicitly. This module is where the CLI turns the
environment into those explicit values.
"""

import os

from civiltime.domain.errors import ParseError
from civiltime.text import parse_offset

ENV_PREFIX = "CIVILTIME"  # pragma: no mutate
DEFAULT_OFFSET_ENV = f"{ENV_PREFIX}_DEFAULT_OFFSET"  # pragma: no mutate


class InvalidDefaultOffsetError(Exception):
    """Raised when CIVILTIME_DEFAULT_OFFSET is set but is not an offset."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{DEFAULT_OFFSET_ENV}={value!r} is not a UTC offset "
            "(expected 'Z' or '+HH:MM' / '-HH:MM')."
        )
        self.value = value


def get_default_offset() -> int | None:
    """Get the offset used for local instants from the environment.

    Returns:
        Minutes east of UTC from `CIVILTIME_DEFAULT_OFFSET`, or `None` when the
        variable is unset or empty.

    Raises:
        InvalidDefaultOffsetError: If the variable does not parse as an offset.
    """
    if not (value := os.environ.get(DEFAULT_OFFSET_ENV)):
        return None
    try:
        return parse_offset(value.strip())
    except ParseError as e:
        raise InvalidDefaultOffsetError(value) from e
