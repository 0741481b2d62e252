# topmark:header:start
#
#   project      : Seti Icons
#   file         : __main__.py
#   file_relpath : src/seti_icons/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Module entry point for running Seti Icons via ``python -m seti_icons``.

Delegates directly to `seti_icons.cli.main.cli`, so the module and the
``seti-icons`` console script behave identically.

Examples:
    Resolve a few names::

        python -m seti_icons resolve Dockerfile main.py .gitignore
"""

from __future__ import annotations

from seti_icons.cli.main import cli

if __name__ == "__main__":
    cli()
