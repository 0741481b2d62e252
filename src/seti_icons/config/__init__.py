# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Configuration for Seti Icons: logging setup and color themes.

The bundled default theme (``seti-default-theme.toml``) is a package resource of
this package.
"""

from __future__ import annotations

from seti_icons.config.theme import ColorTheme, load_default_theme, load_theme_file

__all__: list[str] = ["ColorTheme", "load_default_theme", "load_theme_file"]
