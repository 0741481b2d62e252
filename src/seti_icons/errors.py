# topmark:header:start
#
#   project      : Seti Icons
#   file         : errors.py
#   file_relpath : src/seti_icons/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Library exceptions for Seti Icons.

Resolution never fails and rendering misses are reported as absent results, so
the only exceptions raised by the library concern the data it is given:

- `IconDataError`: the rule table or icon content table is missing or malformed.
  Raised at load time; the process cannot resolve anything without this data.
- `ThemeError`: a color theme file cannot be read or has the wrong shape.
"""

from __future__ import annotations


class SetiIconsError(Exception):
    """Base class for all Seti Icons errors."""


class IconDataError(SetiIconsError):
    """Icon data (rule table or icon content table) is missing or malformed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


class ThemeError(SetiIconsError):
    """A color theme file is unreadable or malformed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
