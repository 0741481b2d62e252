# topmark:header:start
#
#   project      : Seti Icons
#   file         : cmd_common.py
#   file_relpath : src/seti_icons/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Helpers shared by Seti Icons CLI commands.

Commands read the shared state placed on ``ctx.obj`` by the group callback and
use these helpers to load icon data and themes, translating library errors into
CLI errors with the matching exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from seti_icons.cli.errors import (
    SetiIconsDataError,
    SetiIconsFileNotFoundError,
    SetiIconsThemeError,
)
from seti_icons.config.logging import get_logger
from seti_icons.config.theme import load_default_theme, load_theme_file
from seti_icons.errors import IconDataError, ThemeError
from seti_icons.rules.loader import get_icon_data, load
from seti_icons.rules.model import IconData

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from seti_icons.cli.console import ConsoleLike
    from seti_icons.config.logging import SetiIconsLogger
    from seti_icons.config.theme import ColorTheme

logger: SetiIconsLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_cli_icon_data(ctx: click.Context) -> IconData:
    """Load the icon data selected by ``--data-dir`` (or the process-wide default).

    Raises:
        SetiIconsDataError: If the icon data is missing or malformed.
    """
    data_dir: Path | None = ctx.obj.get("data_dir")
    try:
        if data_dir is None:
            return get_icon_data()
        rules, icons = load(data_dir)
    except IconDataError as exc:
        raise SetiIconsDataError(str(exc)) from exc
    return IconData(rules=rules, icons=icons)


def get_cli_theme(theme_path: Path | None) -> ColorTheme:
    """Load the theme given by ``--theme`` or the bundled default theme.

    Raises:
        SetiIconsFileNotFoundError: If ``theme_path`` does not exist.
        SetiIconsThemeError: If the theme file is unreadable or malformed.
    """
    if theme_path is not None and not theme_path.exists():
        raise SetiIconsFileNotFoundError(f"theme file not found: {theme_path}")
    try:
        if theme_path is None:
            return load_default_theme()
        return load_theme_file(theme_path)
    except ThemeError as exc:
        raise SetiIconsThemeError(str(exc)) from exc
