# topmark:header:start
#
#   project      : Seti Icons
#   file         : errors.py
#   file_relpath : src/seti_icons/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Exceptions for the Seti Icons CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors
    ([`seti_icons.errors.SetiIconsError`][]) are translated at the command
    boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from seti_icons.cli.exit_codes import ExitCode


class SetiIconsCliError(click.ClickException):
    """Base class for all Seti Icons CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SetiIconsUsageError(SetiIconsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SetiIconsDataError(SetiIconsCliError):
    """Error for icon data that is missing, malformed or out of lock-step."""

    exit_code = ExitCode.DATA_ERROR


class SetiIconsThemeError(SetiIconsCliError):
    """Error for color theme files that are unreadable or malformed."""

    exit_code = ExitCode.CONFIG_ERROR


class SetiIconsFileNotFoundError(SetiIconsCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SetiIconsUnexpectedError(SetiIconsCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
