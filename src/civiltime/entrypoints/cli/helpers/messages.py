"""Terminal message helpers for the civiltime CLI.

User-facing notices go to stderr so stdout carries only results, which keeps
``civiltime parse ... | other-tool`` pipelines clean.
"""

import click

from civiltime.domain.errors import ParseError


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Re-queries Click's stderr stream on every call so that terminals without
    UTF-8 fall back to ASCII instead of raising `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  Day of month clamped from 31 to 28.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def describe_parse_error(err: ParseError) -> str:
    """Render a parse failure with a caret under the failing byte.

    Example::

        invalid date at offset 8
          2023-02-30
                  ^
    """
    return "\n".join(
        [
            f"{err.kind.value} at offset {err.offset}",
            f"  {err.text}",
            "  " + " " * err.offset + "^",
        ]
    )
