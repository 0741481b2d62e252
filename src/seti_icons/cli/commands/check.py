# topmark:header:start
#
#   project      : Seti Icons
#   file         : check.py
#   file_relpath : src/seti_icons/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons `check` command.

Verifies that the rule table and the icon content table are in lock-step:
every icon key referenced by a rule must have SVG markup. Also reports color
keys the active theme does not define (these fall back to ``white``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seti_icons.cli.cmd_common import (
    get_cli_icon_data,
    get_cli_theme,
    get_console,
    get_effective_verbosity,
)
from seti_icons.cli.exit_codes import ExitCode
from seti_icons.constants import DEFAULT_COLOR

if TYPE_CHECKING:
    from seti_icons.cli.console import ConsoleLike
    from seti_icons.config.theme import ColorTheme
    from seti_icons.rules.model import IconData


@click.command(
    name="check",
    help="Check the icon data for rules without SVG markup.",
)
@click.option(
    "--theme",
    "theme_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML color theme file to check color coverage against.",
)
def check_command(*, theme_path: Path | None = None) -> None:
    """Report lock-step violations and theme coverage.

    Exits with ``ExitCode.DATA_ERROR`` when an icon key has no markup. Missing
    theme colors are reported as warnings only.

    Args:
        theme_path (Path | None): Optional TOML theme file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    data: IconData = get_cli_icon_data(ctx)
    theme: ColorTheme = get_cli_theme(theme_path)

    missing_icons: list[str] = data.rules.missing_icons(data.icons)
    missing_colors: list[str] = sorted(
        key for key in data.rules.color_keys() if key not in theme.colors
    )

    for icon in missing_icons:
        console.error(f"icon '{icon}' is referenced by the rule table but has no SVG markup")

    has_fallback: bool = DEFAULT_COLOR in theme.colors
    if not has_fallback:
        console.warn(
            f"theme '{theme.name}' has no '{DEFAULT_COLOR}' color; "
            "names with an unthemed color cannot render"
        )
    outcome: str = f"falls back to {DEFAULT_COLOR}" if has_fallback else "cannot render"
    for color in missing_colors:
        if color == DEFAULT_COLOR:
            continue
        console.warn(f"color '{color}' is not defined by theme '{theme.name}' ({outcome})")

    if vlevel >= 0:
        console.print(
            f"{len(data.rules.icon_keys())} icon keys, {len(data.icons)} icons, "
            f"{len(missing_icons)} missing icon(s), {len(missing_colors)} unthemed color(s)"
        )
    if missing_icons:
        ctx.exit(ExitCode.DATA_ERROR)
