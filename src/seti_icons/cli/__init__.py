# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons CLI package.

This package groups all Click command definitions and supporting utilities
for the ``seti-icons`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        seti-icons = "seti_icons.cli.main:cli"

All subcommands live in ``seti_icons.cli.commands``.
"""

from __future__ import annotations

__all__: list[str] = []
