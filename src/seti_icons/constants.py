# topmark:header:start
#
#   project      : Seti Icons
#   file         : constants.py
#   file_relpath : src/seti_icons/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Seti Icons constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SETI_ICONS_VERSION: str = get_version("seti-icons")

# Bundled data artifacts produced by the offline build step
DATA_PACKAGE: Final[str] = "seti_icons.data"
DEFINITIONS_FILE_NAME: Final[str] = "definitions.json"
ICONS_FILE_NAME: Final[str] = "icons.json"

# Environment override for the directory holding the two data artifacts
DATA_DIR_ENV: Final[str] = "SETI_ICONS_DATA_DIR"

# Bundled default color theme inside the package `seti_icons.config`
DEFAULT_THEME_PACKAGE: Final[str] = "seti_icons.config"
DEFAULT_THEME_NAME: Final[str] = "seti-default-theme.toml"

DEFAULT_ICON: Final[str] = "default"
DEFAULT_COLOR: Final[str] = "white"

# Historical color alias found in the upstream stylesheet data
COLOR_ALIASES: Final[dict[str, str]] = {"seti-primary": "blue"}
