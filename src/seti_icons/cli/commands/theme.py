# topmark:header:start
#
#   project      : Seti Icons
#   file         : theme.py
#   file_relpath : src/seti_icons/cli/commands/theme.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons `theme` command: print the colors of the active theme."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seti_icons.cli.cmd_common import get_cli_theme, get_console
from seti_icons.cli.options import OutputFormat, output_format_option
from seti_icons.cli.utils import emit_document, emit_machine, render_markdown_table

if TYPE_CHECKING:
    from seti_icons.cli.console import ConsoleLike
    from seti_icons.config.theme import ColorTheme


@click.command(
    name="theme",
    help="Show the colors of a theme (the bundled theme by default).",
)
@click.option(
    "--theme",
    "theme_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML color theme file.",
)
@output_format_option
def theme_command(
    *,
    theme_path: Path | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Print the theme's color keys and values."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)

    theme: ColorTheme = get_cli_theme(theme_path)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        emit_document(console, {"name": theme.name, "colors": dict(theme.colors)})
    elif fmt == OutputFormat.NDJSON:
        emit_machine(
            console, [{"key": k, "value": v} for k, v in theme.colors.items()], fmt=fmt
        )
    elif fmt == OutputFormat.MARKDOWN:
        rows = [[f"`{k}`", f"`{v}`"] for k, v in theme.colors.items()]
        console.print(f"# Theme `{theme.name}`\n")
        console.print(render_markdown_table(["Color key", "Value"], rows))
    else:
        console.print(console.styled(theme.name, bold=True))
        key_width = max((len(k) for k in theme.colors), default=1)
        for key, value in theme.colors.items():
            console.print(f"  {key:<{key_width}}  {value}")
