# topmark:header:start
#
#   project      : Seti Icons
#   file         : rules.py
#   file_relpath : src/seti_icons/cli/commands/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons `rules` command.

Lists the entries of the rule table. File and extension rules are sorted by
key; partial rules are listed in scan order, which is also their precedence.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import click

from seti_icons.cli.cmd_common import get_cli_icon_data, get_console, get_effective_verbosity
from seti_icons.cli.options import EnumChoiceParam, OutputFormat, output_format_option
from seti_icons.cli.utils import emit_machine, render_markdown_table

if TYPE_CHECKING:
    from seti_icons.cli.console import ConsoleLike
    from seti_icons.rules.model import IconPair, RuleTable


class RuleSection(str, Enum):
    """Section of the rule table."""

    FILES = "files"
    EXTENSIONS = "extensions"
    PARTIALS = "partials"


def _section_entries(rules: RuleTable, section: RuleSection) -> list[tuple[str, IconPair]]:
    if section == RuleSection.FILES:
        return sorted(rules.files.items())
    if section == RuleSection.EXTENSIONS:
        return sorted(rules.extensions.items())
    return list(rules.partials)


@click.command(
    name="rules",
    help="List the file name, extension and partial rules.",
)
@click.option(
    "--section",
    "sections",
    type=EnumChoiceParam(RuleSection),
    multiple=True,
    help="Restrict output to a section (repeatable): files, extensions, partials.",
)
@output_format_option
def rules_command(
    *,
    sections: tuple[RuleSection, ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """List rule table entries.

    Args:
        sections (tuple[RuleSection, ...]): Sections to list; all when empty.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    rules: RuleTable = get_cli_icon_data(ctx).rules
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    selected: tuple[RuleSection, ...] = sections or tuple(RuleSection)

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        records: list[dict[str, Any]] = [
            {"section": section.value, "key": key, "icon": pair.icon, "color": pair.color}
            for section in selected
            for key, pair in _section_entries(rules, section)
        ]
        emit_machine(console, records, fmt=fmt)
        return

    for section in selected:
        entries = _section_entries(rules, section)
        if fmt == OutputFormat.MARKDOWN:
            console.print(f"## {section.value.capitalize()} ({len(entries)})\n")
            rows = [[f"`{key}`", pair.icon, pair.color] for key, pair in entries]
            console.print(render_markdown_table(["Rule", "Icon", "Color"], rows))
            continue

        console.print(console.styled(f"{section.value} ({len(entries)}):", bold=True))
        key_width = max((len(key) for key, _pair in entries), default=1)
        for idx, (key, pair) in enumerate(entries, start=1):
            prefix = f"{idx:>4}. " if section == RuleSection.PARTIALS else "  "
            console.print(f"{prefix}{key:<{key_width}}  {pair.icon} {pair.color}")
        console.print()

    if vlevel > 0 and fmt == OutputFormat.TEXT:
        console.print(console.styled(f"default: {rules.default.icon} {rules.default.color}", dim=True))
