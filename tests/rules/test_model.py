# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_model.py
#   file_relpath : tests/rules/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Unit tests for the rule table model."""

from __future__ import annotations

import dataclasses

import pytest

from seti_icons.rules.model import DEFAULT_PAIR, IconPair, RuleTable


def test_empty_table_defaults() -> None:
    """An empty table only knows the default pair."""
    table = RuleTable()

    assert table.default == DEFAULT_PAIR == IconPair("default", "white")
    assert table.icon_keys() == {"default"}
    assert table.color_keys() == {"white"}


def test_build_coerces_raw_pairs() -> None:
    """Lists and tuples become IconPair instances."""
    table = RuleTable.build(
        files={"Makefile": ("makefile", "orange")},  # type: ignore[dict-item]
        partials=[("TODO", ["todo", "white"])],  # type: ignore[list-item]
    )

    assert table.files["Makefile"] == IconPair("makefile", "orange")
    assert isinstance(table.partials[0][1], IconPair)


def test_table_is_frozen(sample_rules: RuleTable) -> None:
    """Fields cannot be reassigned after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_rules.default = IconPair("x", "y")  # type: ignore[misc]


def test_missing_icons(sample_rules: RuleTable) -> None:
    """Only keys absent from the icon table are reported, sorted."""
    icons = {"docker": "", "javascript": "", "yml": "", "git": "", "markdown": ""}

    assert sample_rules.missing_icons(icons) == ["config", "default", "webpack"]
