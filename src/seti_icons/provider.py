# topmark:header:start
#
#   project      : Seti Icons
#   file         : provider.py
#   file_relpath : src/seti_icons/provider.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Themed icon provider.

Combines a resolved ``(icon key, color key)`` pair with the icon content table
and a caller-supplied color theme into renderable output.

Rendering can miss in two ways, both reported as an absent result (``None``)
rather than an exception:

- the icon key has no SVG markup (the data tables are out of lock-step);
- the theme has neither the color key nor a ``white`` fallback.

Use `explain_render` when the reason for a miss matters.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from seti_icons.config.logging import get_logger
from seti_icons.constants import DEFAULT_COLOR
from seti_icons.resolver import match
from seti_icons.rules.loader import get_icon_data

if TYPE_CHECKING:
    from seti_icons.config.logging import SetiIconsLogger
    from seti_icons.rules.model import RuleMatch, RuleTable

logger: SetiIconsLogger = get_logger(__name__)


class ThemedIcon(NamedTuple):
    """Renderable result: literal SVG markup and a literal color value."""

    svg: str
    color: str


class RenderMiss(Enum):
    """Why a file name could not be rendered.

    Attributes:
        MISSING_ICON: The resolved icon key has no SVG markup.
        MISSING_COLOR: The theme has neither the resolved color key nor ``white``.
    """

    MISSING_ICON = "missing_icon"
    MISSING_COLOR = "missing_color"


class RenderOutcome(NamedTuple):
    """Full outcome of rendering one file name.

    Attributes:
        match (RuleMatch): How the file name was resolved.
        themed (ThemedIcon | None): The renderable result, or None on a miss.
        miss (RenderMiss | None): The reason for a miss, or None on success.
    """

    match: RuleMatch
    themed: ThemedIcon | None
    miss: RenderMiss | None = None


# A theme bound to the icon data: file name in, renderable result (or None) out
IconRenderer = Callable[[str], ThemedIcon | None]


def theme_color(color_theme: Mapping[str, str], color_key: str) -> str | None:
    """Look up ``color_key`` in the theme, falling back to its ``white`` value.

    Returns None when neither is present; a color value is never invented.
    """
    value: str | None = color_theme.get(color_key)
    if value is None:
        value = color_theme.get(DEFAULT_COLOR)
    return value


def explain_render(
    file_name: str,
    color_theme: Mapping[str, str],
    *,
    rules: RuleTable | None = None,
    icons: Mapping[str, str] | None = None,
) -> RenderOutcome:
    """Resolve and render ``file_name``, reporting the reason for any miss.

    Args:
        file_name (str): The file name to render.
        color_theme (Mapping[str, str]): Color key to color value mapping.
        rules (RuleTable | None): Rule table; defaults to the bundled one.
        icons (Mapping[str, str] | None): Icon content table; defaults to the
            bundled one.

    Returns:
        RenderOutcome: The match, the themed icon (or None) and the miss reason.
    """
    if rules is None or icons is None:
        data = get_icon_data()
        rules = rules if rules is not None else data.rules
        icons = icons if icons is not None else data.icons

    rule_match: RuleMatch = match(file_name, rules=rules)
    icon_key, color_key = rule_match.pair

    svg: str | None = icons.get(icon_key)
    if svg is None:
        logger.debug("'%s': icon '%s' has no SVG markup", file_name, icon_key)
        return RenderOutcome(rule_match, None, RenderMiss.MISSING_ICON)

    color: str | None = theme_color(color_theme, color_key)
    if color is None:
        logger.debug("'%s': theme has no color for '%s' and no fallback", file_name, color_key)
        return RenderOutcome(rule_match, None, RenderMiss.MISSING_COLOR)

    return RenderOutcome(rule_match, ThemedIcon(svg=svg, color=color))


def theme_icons(
    color_theme: Mapping[str, str],
    *,
    rules: RuleTable | None = None,
    icons: Mapping[str, str] | None = None,
) -> IconRenderer:
    """Bind a color theme and return a reusable renderer.

    The theme is copied once at bind time, so later changes to the caller's
    mapping do not leak into the returned renderer.

    Example:
        >> get_icon = theme_icons({"blue": "#268bd2", "white": "#fdf6e3"})
        >> get_icon("main.js")
        ThemedIcon(svg='<svg ...>', color='#268bd2')

    Args:
        color_theme (Mapping[str, str]): Color key to color value mapping.
        rules (RuleTable | None): Rule table; defaults to the bundled one.
        icons (Mapping[str, str] | None): Icon content table; defaults to the
            bundled one.

    Returns:
        IconRenderer: A function from file name to `ThemedIcon` or None.
    """
    bound: Mapping[str, str] = MappingProxyType(dict(color_theme))
    if DEFAULT_COLOR not in bound:
        logger.warning("Color theme has no '%s' entry; unmatched files cannot render", DEFAULT_COLOR)

    def get_icon(file_name: str) -> ThemedIcon | None:
        return explain_render(file_name, bound, rules=rules, icons=icons).themed

    return get_icon


def render_icon(
    file_name: str,
    color_theme: Mapping[str, str],
    *,
    rules: RuleTable | None = None,
    icons: Mapping[str, str] | None = None,
) -> ThemedIcon | None:
    """Render a single file name with ``color_theme`` (no binding step)."""
    return explain_render(file_name, color_theme, rules=rules, icons=icons).themed


# Short name matching the public `theme(colorTheme)(fileName)` call shape
theme = theme_icons
