# topmark:header:start
#
#   project      : Seti Icons
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""CLI test helpers for running the Seti Icons CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from seti_icons.cli.exit_codes import ExitCode
from seti_icons.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: Sequence[str], *, color: bool = False) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["resolve", "Dockerfile"]``.
        color (bool): When False (the default) ``--no-color`` is prepended so
            that assertions are not affected by a ``FORCE_COLOR`` environment.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    args: list[str] = list(argv) if color else ["--no-color", *argv]
    return CliRunner().invoke(cli, args)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def parse_json(result: Result) -> Any:
    """Decode the JSON document printed by a command."""
    return json.loads(result.stdout)


def parse_ndjson(result: Result) -> list[Any]:
    """Decode the NDJSON lines printed by a command."""
    return [json.loads(line) for line in result.stdout.splitlines() if line.strip()]
