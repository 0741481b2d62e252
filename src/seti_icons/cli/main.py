# topmark:header:start
#
#   project      : Seti Icons
#   file         : main.py
#   file_relpath : src/seti_icons/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Click entry point for the ``seti-icons`` CLI.

Group-level options are initialized once and placed into ``ctx.obj``
(``console``, ``verbosity_level``, ``data_dir``); subcommands read them back
through [`seti_icons.cli.cmd_common`][].
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from seti_icons.cli.commands.check import check_command
from seti_icons.cli.commands.resolve import resolve_command
from seti_icons.cli.commands.rules import rules_command
from seti_icons.cli.commands.theme import theme_command
from seti_icons.cli.commands.version import version_command
from seti_icons.cli.console import ClickConsole
from seti_icons.cli.errors import SetiIconsUnexpectedError
from seti_icons.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from seti_icons.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    data_dir: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, data source) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        data_dir (Path | None): Directory with ``definitions.json`` and ``icons.json``.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["data_dir"] = data_dir


class SetiIconsGroup(click.Group):
    """Click group that maps unhandled exceptions to ``ExitCode.UNEXPECTED_ERROR``."""

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, converting stray exceptions into a CLI error."""
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:
            logger.debug("Unhandled exception in command", exc_info=True)
            raise SetiIconsUnexpectedError(
                f"unexpected error: {type(exc).__name__}: {exc}"
            ) from exc


@click.group(
    cls=SetiIconsGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Seti Icons CLI: map file names to Seti UI icons and colors.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="SETI_ICONS_DATA_DIR",
    default=None,
    help="Directory containing definitions.json and icons.json (defaults to bundled data).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    data_dir: Path | None,
) -> None:
    """Entry point for the Seti Icons CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        data_dir=data_dir,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'seti-icons resolve NAME...' to look up icons.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(resolve_command)

cli.add_command(rules_command)

cli.add_command(check_command)

cli.add_command(theme_command)

if __name__ == "__main__":
    cli()
