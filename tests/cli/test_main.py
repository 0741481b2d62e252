# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""CLI tests for group-level options."""

from __future__ import annotations

import pytest

from seti_icons.cli.exit_codes import ExitCode
from seti_icons.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_no_command_prints_help() -> None:
    """Running without a subcommand shows a hint and the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "seti-icons resolve NAME" in result.stdout
    assert "Commands:" in result.stdout


def test_verbose_and_quiet_are_exclusive() -> None:
    """`-v` with `-q` is a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_verbose_text_shows_theme_name() -> None:
    """With `-v` the text output names the theme."""
    result = run_cli(["-v", "resolve", "main.py"])

    assert_SUCCESS(result)
    assert "Theme: solarized" in result.stdout


def test_unknown_format_is_rejected() -> None:
    """Invalid `--format` values are rejected by the parameter type."""
    result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code != ExitCode.SUCCESS
    assert "Must be one of: text, markdown, json, ndjson" in result.output


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [(0, 0, 0), (2, 0, 2), (0, 1, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """Verbosity is positive for -v and negative for -q."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit modes win; otherwise NO_COLOR and the TTY decide."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=None, stdout_isatty=True) is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False


def test_unhandled_exception_is_unexpected_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """A stray exception inside a command exits with UNEXPECTED_ERROR, not a traceback."""

    def _explode(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr("seti_icons.cli.commands.resolve.explain_render", _explode)

    result = run_cli(["resolve", "main.py"])

    assert result.exit_code == ExitCode.UNEXPECTED_ERROR
    assert "unexpected error: RuntimeError: renderer exploded" in result.output
