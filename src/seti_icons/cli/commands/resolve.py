# topmark:header:start
#
#   project      : Seti Icons
#   file         : resolve.py
#   file_relpath : src/seti_icons/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons `resolve` command.

Resolves file names to their icon key and color key, and renders them with a
color theme (the bundled Solarized theme unless ``--theme`` is given).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from seti_icons.cli.cmd_common import (
    get_cli_icon_data,
    get_cli_theme,
    get_console,
    get_effective_verbosity,
)
from seti_icons.cli.exit_codes import ExitCode
from seti_icons.cli.options import OutputFormat, output_format_option
from seti_icons.cli.utils import emit_machine, render_markdown_table
from seti_icons.provider import explain_render

if TYPE_CHECKING:
    from seti_icons.cli.console import ConsoleLike
    from seti_icons.config.theme import ColorTheme
    from seti_icons.provider import RenderOutcome
    from seti_icons.rules.model import IconData


def _serialize(name: str, outcome: RenderOutcome, *, svg: bool, explain: bool) -> dict[str, Any]:
    rule_match = outcome.match
    record: dict[str, Any] = {
        "name": name,
        "icon": rule_match.pair.icon,
        "color_key": rule_match.pair.color,
        "color": outcome.themed.color if outcome.themed else None,
    }
    if explain:
        record["tier"] = rule_match.tier.value
        record["matched"] = rule_match.key
    if outcome.miss is not None:
        record["miss"] = outcome.miss.value
    if svg:
        record["svg"] = outcome.themed.svg if outcome.themed else None
    return record


@click.command(
    name="resolve",
    help="Resolve file names to their icon and color.",
    epilog="""
Pass bare file names or extensions (e.g. 'Dockerfile', 'app.test.js', '.gitignore').
Directory parts are not stripped.
""",
)
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--theme",
    "theme_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML color theme file (defaults to the bundled theme).",
)
@click.option("--svg", "show_svg", is_flag=True, help="Include the SVG markup.")
@click.option(
    "--explain",
    is_flag=True,
    help="Show which rule tier (exact, extension, partial, default) decided.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with a failure code if any name cannot be rendered.",
)
@output_format_option
def resolve_command(
    *,
    names: tuple[str, ...],
    theme_path: Path | None = None,
    show_svg: bool = False,
    explain: bool = False,
    strict: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Resolve and render file names.

    Args:
        names (tuple[str, ...]): File names or extensions to resolve.
        theme_path (Path | None): Optional TOML theme file.
        show_svg (bool): Include the SVG markup in the output.
        explain (bool): Include the deciding tier and matched key.
        strict (bool): Exit with ``ExitCode.FAILURE`` on any render miss.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    data: IconData = get_cli_icon_data(ctx)
    theme: ColorTheme = get_cli_theme(theme_path)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    outcomes: list[tuple[str, RenderOutcome]] = [
        (name, explain_render(name, theme.colors, rules=data.rules, icons=data.icons))
        for name in names
    ]
    misses: int = sum(1 for _name, outcome in outcomes if outcome.themed is None)

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        emit_machine(
            console,
            [_serialize(n, o, svg=show_svg, explain=explain) for n, o in outcomes],
            fmt=fmt,
        )
    elif fmt == OutputFormat.MARKDOWN:
        headers = ["Name", "Icon", "Color key", "Color"]
        if explain:
            headers += ["Tier", "Matched"]
        rows: list[list[str]] = []
        for name, outcome in outcomes:
            pair = outcome.match.pair
            color = outcome.themed.color if outcome.themed else "-"
            row = [f"`{name}`", pair.icon, pair.color, color]
            if explain:
                row += [outcome.match.tier.value, f"`{outcome.match.key or ''}`"]
            rows.append(row)
        console.print(render_markdown_table(headers, rows))
    else:
        if vlevel > 0:
            console.print(console.styled(f"Theme: {theme.name}\n", bold=True, underline=True))
        name_width = max(len(name) for name in names)
        for name, outcome in outcomes:
            pair = outcome.match.pair
            if outcome.themed is not None:
                color_text = console.styled(outcome.themed.color, fg="bright_black")
            else:
                color_text = console.styled(f"({outcome.miss.value})", fg="red")  # type: ignore[union-attr]
            line = f"{name:<{name_width}}  {pair.icon} {pair.color} {color_text}"
            if explain:
                how = outcome.match.tier.value
                if outcome.match.key is not None:
                    how += f" '{outcome.match.key}'"
                line += console.styled(f"  [{how}]", dim=True)
            console.print(line)
            if show_svg and outcome.themed is not None:
                console.print(f"  {outcome.themed.svg}")

        if vlevel > 0 and misses:
            console.warn(f"{misses} of {len(names)} name(s) could not be rendered.")

    if strict and misses:
        ctx.exit(ExitCode.FAILURE)
