# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_check_command.py
#   file_relpath : tests/cli/test_check_command.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""CLI tests for the `check` command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from seti_icons.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli

Writer = Callable[[Any, Any], Path]


def test_bundled_data_is_in_lock_step() -> None:
    """The bundled tables have markup for every referenced icon."""
    result = run_cli(["check"])

    assert_SUCCESS(result)
    assert "0 missing icon(s)" in result.stdout


def test_missing_markup_is_data_error(
    write_icon_data: Writer,
    minimal_definitions: dict[str, Any],
    minimal_icons: dict[str, str],
) -> None:
    """An icon key without markup fails the check."""
    del minimal_icons["hex"]
    data_dir = write_icon_data(minimal_definitions, minimal_icons)

    result = run_cli(["--data-dir", str(data_dir), "check"])

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "icon 'hex' is referenced by the rule table" in result.output
    assert "1 missing icon(s)" in result.output


def test_unthemed_colors_are_warnings(
    tmp_path: Path,
    write_icon_data: Writer,
    minimal_definitions: dict[str, Any],
    minimal_icons: dict[str, str],
) -> None:
    """Colors missing from the theme are reported without failing."""
    data_dir = write_icon_data(minimal_definitions, minimal_icons)
    theme = tmp_path / "tiny.toml"
    theme.write_text('[colors]\nwhite = "#fff"\nblue = "#00f"\n', encoding="utf-8")

    result = run_cli(["--data-dir", str(data_dir), "check", "--theme", str(theme)])

    assert_SUCCESS(result)
    assert "color 'orange' is not defined by theme 'tiny' (falls back to white)" in result.output
    assert "1 unthemed color(s)" in result.output


def test_theme_without_white_cannot_render_unthemed_colors(
    tmp_path: Path,
    write_icon_data: Writer,
    minimal_definitions: dict[str, Any],
    minimal_icons: dict[str, str],
) -> None:
    """Without `white` there is no fallback, and the report says so."""
    data_dir = write_icon_data(minimal_definitions, minimal_icons)
    theme = tmp_path / "bare.toml"
    theme.write_text('[colors]\nblue = "#00f"\n', encoding="utf-8")

    result = run_cli(["--data-dir", str(data_dir), "check", "--theme", str(theme)])

    assert_SUCCESS(result)
    assert "theme 'bare' has no 'white' color" in result.output
    assert "color 'orange' is not defined by theme 'bare' (cannot render)" in result.output
    assert "falls back to white" not in result.output
    assert "2 unthemed color(s)" in result.output
