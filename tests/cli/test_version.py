# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import pytest

from seti_icons.constants import SETI_ICONS_VERSION
from tests.cli.conftest import assert_SUCCESS, parse_json, parse_ndjson, run_cli

pytestmark = pytest.mark.cli


def test_version_text() -> None:
    """It should output the installed version string exactly."""
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == SETI_ICONS_VERSION


def test_version_json() -> None:
    """JSON output is a single object."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert parse_json(result) == {"version": SETI_ICONS_VERSION}


def test_version_ndjson() -> None:
    """NDJSON output is one line."""
    result = run_cli(["version", "--format", "ndjson"])

    assert_SUCCESS(result)
    assert parse_ndjson(result) == [{"version": SETI_ICONS_VERSION}]


def test_version_markdown() -> None:
    """Markdown output is bold text."""
    result = run_cli(["version", "--format", "markdown"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == f"**Seti Icons version {SETI_ICONS_VERSION}**"
