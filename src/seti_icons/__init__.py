# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons package.

Maps a file name (or bare extension) to a Seti UI icon glyph and a semantic
color key, and renders the pair with a caller-supplied color theme.

Typical usage:

    >> from seti_icons import resolve, theme_icons
    >> resolve("Dockerfile")
    IconPair(icon='docker', color='blue')
    >> get_icon = theme_icons({"blue": "#268bd2", "white": "#fdf6e3"})
    >> get_icon("main.py").color
    '#268bd2'
"""

from __future__ import annotations

from seti_icons.config.theme import ColorTheme, load_default_theme, load_theme_file
from seti_icons.errors import IconDataError, SetiIconsError, ThemeError
from seti_icons.provider import (
    IconRenderer,
    RenderMiss,
    RenderOutcome,
    ThemedIcon,
    explain_render,
    render_icon,
    theme,
    theme_icons,
)
from seti_icons.resolver import extension_of, match, resolve
from seti_icons.rules import (
    DEFAULT_PAIR,
    IconContentTable,
    IconData,
    IconPair,
    MatchTier,
    RuleMatch,
    RuleTable,
    get_icon_data,
    load,
)

__all__: list[str] = [
    "DEFAULT_PAIR",
    "ColorTheme",
    "IconContentTable",
    "IconData",
    "IconDataError",
    "IconPair",
    "IconRenderer",
    "MatchTier",
    "RenderMiss",
    "RenderOutcome",
    "RuleMatch",
    "RuleTable",
    "SetiIconsError",
    "ThemeError",
    "ThemedIcon",
    "explain_render",
    "extension_of",
    "get_icon_data",
    "load",
    "load_default_theme",
    "load_theme_file",
    "match",
    "render_icon",
    "resolve",
    "theme",
    "theme_icons",
]
