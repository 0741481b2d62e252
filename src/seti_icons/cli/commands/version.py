# topmark:header:start
#
#   project      : Seti Icons
#   file         : version.py
#   file_relpath : src/seti_icons/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons `version` command.

Prints the current Seti Icons version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from seti_icons.cli.cmd_common import get_console
from seti_icons.cli.options import OutputFormat, output_format_option
from seti_icons.cli.utils import emit_document, emit_machine
from seti_icons.constants import SETI_ICONS_VERSION

if TYPE_CHECKING:
    from seti_icons.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Seti Icons.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Seti Icons."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        emit_document(console, {"version": SETI_ICONS_VERSION})
    elif fmt == OutputFormat.NDJSON:
        emit_machine(console, [{"version": SETI_ICONS_VERSION}], fmt=fmt)
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"**Seti Icons version {SETI_ICONS_VERSION}**")
    else:
        console.print(SETI_ICONS_VERSION)
