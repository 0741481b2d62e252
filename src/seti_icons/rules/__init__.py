# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Rule table and icon content table: data model and loader."""

from __future__ import annotations

from seti_icons.rules.loader import get_icon_data, load, normalize_color
from seti_icons.rules.model import (
    DEFAULT_PAIR,
    IconContentTable,
    IconData,
    IconPair,
    MatchTier,
    RuleMatch,
    RuleTable,
)

__all__: list[str] = [
    "DEFAULT_PAIR",
    "IconContentTable",
    "IconData",
    "IconPair",
    "MatchTier",
    "RuleMatch",
    "RuleTable",
    "get_icon_data",
    "load",
    "normalize_color",
]
