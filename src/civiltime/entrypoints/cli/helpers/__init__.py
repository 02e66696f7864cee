"""CLI helpers for civiltime.

Utilities used by the command-line interface: option callbacks for offset
values, parse-error rendering, and stderr messages with emoji→ASCII fallbacks.
"""

from .messages import describe_parse_error, warn
from .options import parse_offset_option, parse_or_fail

__all__ = ["describe_parse_error", "parse_offset_option", "parse_or_fail", "warn"]
