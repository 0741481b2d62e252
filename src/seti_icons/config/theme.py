# topmark:header:start
#
#   project      : Seti Icons
#   file         : theme.py
#   file_relpath : src/seti_icons/config/theme.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Color themes loaded from TOML.

A theme file has an optional top-level ``name`` and a ``[colors]`` table that
maps color keys to color values:

```toml
name = "solarized"

[colors]
blue = "#268bd2"
white = "#fdf6e3"
```

Parsing is done with `tomlkit`. Unlike the icon data, a malformed theme is a
configuration error of the caller and raises [`seti_icons.errors.ThemeError`][].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from seti_icons.config.logging import get_logger
from seti_icons.constants import DEFAULT_COLOR, DEFAULT_THEME_NAME, DEFAULT_THEME_PACKAGE
from seti_icons.errors import ThemeError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from seti_icons.config.logging import SetiIconsLogger

logger: SetiIconsLogger = get_logger(__name__)

KEY_NAME: str = "name"
SECTION_COLORS: str = "colors"


@dataclass(frozen=True)
class ColorTheme:
    """An immutable, named color theme.

    Pass ``theme.colors`` wherever a ``Mapping[str, str]`` color theme is expected.

    Attributes:
        name (str): Display name of the theme.
        colors (Mapping[str, str]): Color key to color value.
    """

    name: str
    colors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, colors: Mapping[str, str], *, name: str = "custom") -> ColorTheme:
        """Build a theme from a plain mapping (copied)."""
        return cls(name=name, colors=MappingProxyType(dict(colors)))


def parse_theme(text: str, *, source: str = "<string>") -> ColorTheme:
    """Parse TOML text into a `ColorTheme`.

    Args:
        text (str): TOML document text.
        source (str): Name used in error messages and as fallback theme name.

    Returns:
        ColorTheme: The parsed theme.

    Raises:
        ThemeError: If the TOML is invalid or the ``[colors]`` table is missing
            or holds non-string values.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ThemeError(f"invalid TOML: {exc}", source=source) from exc

    data: Any = doc.unwrap()
    colors_any: Any = data.get(SECTION_COLORS)
    if not isinstance(colors_any, dict):
        raise ThemeError(f"missing [{SECTION_COLORS}] table", source=source)

    colors: dict[str, str] = {}
    for key, value in cast("dict[str, Any]", colors_any).items():
        if not isinstance(value, str):
            raise ThemeError(
                f"color '{key}' must be a string, got {type(value).__name__}", source=source
            )
        colors[key] = value

    name_any: Any = data.get(KEY_NAME, Path(source).stem)
    if not isinstance(name_any, str):
        raise ThemeError(f"'{KEY_NAME}' must be a string", source=source)

    if DEFAULT_COLOR not in colors:
        logger.warning(
            "Theme %s has no '%s' color; files without a matching color cannot render",
            source,
            DEFAULT_COLOR,
        )
    logger.debug("Loaded theme '%s' with %d colors from %s", name_any, len(colors), source)
    return ColorTheme(name=name_any, colors=MappingProxyType(colors))


def load_theme_file(path: Path | str) -> ColorTheme:
    """Load a color theme from a TOML file.

    Raises:
        ThemeError: If the file cannot be read or is malformed.
    """
    path = Path(path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeError(f"cannot read theme: {exc}", source=str(path)) from exc
    return parse_theme(text, source=str(path))


def load_default_theme() -> ColorTheme:
    """Load the theme bundled with the package (``seti-default-theme.toml``)."""
    resource = files(DEFAULT_THEME_PACKAGE).joinpath(DEFAULT_THEME_NAME)
    try:
        text: str = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeError(f"cannot read bundled theme: {exc}", source=str(resource)) from exc
    return parse_theme(text, source=DEFAULT_THEME_NAME)
