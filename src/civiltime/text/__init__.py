"""Text codec for civiltime.

Parses and formats the ISO-8601-like timestamp grammar. This is the only wire
format of the library; output must match byte-for-byte across implementations.
"""

from .formatter import canonical_form, format, format_date, format_offset, format_time
from .parser import parse, parse_date, parse_offset

__all__ = [
    "canonical_form",
    "format",
    "format_date",
    "format_offset",
    "format_time",
    "parse",
    "parse_date",
    "parse_offset",
]
