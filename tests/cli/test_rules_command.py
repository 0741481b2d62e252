# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_rules_command.py
#   file_relpath : tests/cli/test_rules_command.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""CLI tests for the `rules` command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tests.cli.conftest import assert_SUCCESS, parse_json, parse_ndjson, run_cli

pytestmark = pytest.mark.cli

Writer = Callable[[Any, Any], Path]


@pytest.fixture
def data_dir(
    write_icon_data: Writer,
    minimal_definitions: dict[str, Any],
    minimal_icons: dict[str, str],
) -> Path:
    """A data directory holding the minimal tables."""
    return write_icon_data(minimal_definitions, minimal_icons)


def test_rules_json_lists_all_sections(data_dir: Path) -> None:
    """Records carry the section; colors are normalized."""
    result = run_cli(["--data-dir", str(data_dir), "rules", "--format", "json"])

    assert_SUCCESS(result)
    assert parse_json(result) == [
        {"section": "files", "key": "Makefile", "icon": "makefile", "color": "orange"},
        {"section": "extensions", "key": ".prettierrc", "icon": "prettier", "color": "blue"},
        {"section": "extensions", "key": ".py", "icon": "python", "color": "blue"},
        {"section": "partials", "key": "TODO", "icon": "todo", "color": "white"},
        {"section": "partials", "key": "mix", "icon": "hex", "color": "blue"},
    ]


def test_rules_section_filter(data_dir: Path) -> None:
    """`--section` restricts the listing."""
    result = run_cli(
        ["--data-dir", str(data_dir), "rules", "--section", "partials", "--format", "ndjson"]
    )

    assert_SUCCESS(result)
    assert [r["key"] for r in parse_ndjson(result)] == ["TODO", "mix"]


def test_rules_text_numbers_partials(data_dir: Path) -> None:
    """Partials are numbered in scan order."""
    result = run_cli(["--data-dir", str(data_dir), "rules", "--section", "partials"])

    assert_SUCCESS(result)
    assert "partials (2):" in result.stdout
    assert "   1. TODO" in result.stdout
    assert "   2. mix " in result.stdout


def test_rules_markdown(data_dir: Path) -> None:
    """Markdown output has a heading and a table per section."""
    result = run_cli(["--data-dir", str(data_dir), "rules", "--format", "markdown"])

    assert_SUCCESS(result)
    assert "## Files (1)" in result.stdout
    assert "| `.py` " in result.stdout


def test_rules_bundled_partials_in_scan_order() -> None:
    """The bundled table starts its scan with `config`."""
    result = run_cli(["rules", "--section", "partials", "--format", "json"])

    assert_SUCCESS(result)
    keys = [r["key"] for r in parse_json(result)]
    assert keys[0] == "config"
    assert keys.index("webpack") < keys.index("Dockerfile")
