"""Functional tests for civiltime's CLI help and version output.

This suite verifies:
- The long-form `HELP` prose from `civiltime.entrypoints.cli.main` is rendered
  on `--help` (compared after stripping ANSI and normalizing whitespace).
- The help frame appears (Usage/Options/Commands) and lists every subcommand.
- `--version` reports the package version.

Notes:
- Help text can be reflowed by Click; `_normalize()` collapses whitespace so the
  comparison is robust to wrapping.
"""

from __future__ import annotations

import re
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

import civiltime
from civiltime.entrypoints.cli import main

if TYPE_CHECKING:
    from click.testing import Result

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with leading/trailing space trimmed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", s.strip())


def _assert_help_displayed(result: Result):
    """Assert that help output contains the project HELP text and expected sections."""
    # pylint: disable=magic-value-comparison
    text = ANSI_RE.sub("", result.output)
    expected_message = _normalize(dedent(main.HELP))
    assert expected_message
    assert expected_message in _normalize(text), "HELP text not rendered."
    assert "Usage:" in text
    assert "Options:" in text
    assert "Commands:" in text
    for command in ("parse", "add", "compare", "info"):
        assert re.search(rf"^\s+{command}\b", text, re.MULTILINE), command


# ============================================================================
#                           Tests
# ============================================================================


class TestNewCivilTimeUser:
    """A new user of civiltime, unfamiliar with the tool, tries to get help."""

    @staticmethod
    @pytest.mark.parametrize("args", ([], ["-h"], ["--help"]))
    def test_civiltime_help_output(args: list[str]):
        """Verify that help is shown with no args/-h/--help.

        Given civiltime is available on the PATH
        When `civiltime` is invoked with no args, `-h`, or `--help`
        Then the long HELP prose and the list of commands appear
        """
        runner = CliRunner()
        result = runner.invoke(main.civiltime, args)

        _assert_help_displayed(result)

    @staticmethod
    @pytest.mark.parametrize("args", (["-h"], ["--help"]))
    def test_civiltime_help_exits_cleanly(args: list[str]):
        """Rendering the help never fails inside click-extra's formatter."""
        runner = CliRunner()
        result = runner.invoke(main.civiltime, args)

        assert result.exception is None, repr(result.exception)
        assert result.exit_code == 0

    @staticmethod
    def test_civiltime_version_output():
        """User runs --version and sees the version string."""
        runner = CliRunner()
        result = runner.invoke(main.civiltime, ["--version"])

        assert result.exit_code == 0
        assert civiltime.__version__ in result.output

    @staticmethod
    @pytest.mark.parametrize("command", ["parse", "add", "compare", "info"])
    def test_subcommand_help(command: str):
        """Each subcommand documents itself."""
        runner = CliRunner()
        result = runner.invoke(main.civiltime, [command, "--help"])

        assert result.exit_code == 0
        assert "Usage:" in result.output
