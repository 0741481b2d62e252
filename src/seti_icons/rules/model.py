# topmark:header:start
#
#   project      : Seti Icons
#   file         : model.py
#   file_relpath : src/seti_icons/rules/model.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Immutable data model for icon rules and icon markup.

The rule table decides *which* icon and color key apply to a file name; the icon
content table holds the SVG markup for each icon key. Both are produced by the
offline build step and are never mutated after loading.

Notes:
    * ``partials`` is an ordered tuple. Its order is part of the resolution
      semantics (first substring hit wins) and must never be re-sorted.
    * ``files`` and ``extensions`` are exposed as read-only mapping proxies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from seti_icons.constants import DEFAULT_COLOR, DEFAULT_ICON

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


class IconPair(NamedTuple):
    """An ``(icon key, color key)`` pair as stored in the rule table."""

    icon: str
    color: str


DEFAULT_PAIR: IconPair = IconPair(DEFAULT_ICON, DEFAULT_COLOR)

# Read-only mapping from icon key to literal SVG markup
IconContentTable = MappingProxyType[str, str]


class MatchTier(Enum):
    """Precedence tier that decided a resolution.

    Attributes:
        EXACT: The whole file name is a key of ``files``.
        EXTENSION: The trailing ``.ext`` is a key of ``extensions``.
        PARTIAL: A ``partials`` pattern occurs in the file name.
        DEFAULT: Nothing matched; the fallback pair applies.
    """

    EXACT = "exact"
    EXTENSION = "extension"
    PARTIAL = "partial"
    DEFAULT = "default"


class RuleMatch(NamedTuple):
    """Outcome of matching a file name against a rule table.

    Attributes:
        pair (IconPair): The resolved icon/color pair.
        tier (MatchTier): The tier that produced ``pair``.
        key (str | None): The file name, extension or partial pattern that
            matched; ``None`` for the default tier.
    """

    pair: IconPair
    tier: MatchTier
    key: str | None = None


def _frozen_map(data: Mapping[str, IconPair] | None = None) -> MappingProxyType[str, IconPair]:
    return MappingProxyType({key: IconPair(*pair) for key, pair in (data or {}).items()})


@dataclass(frozen=True)
class RuleTable:
    """File name, extension and partial rules mapping to icon/color pairs.

    Attributes:
        files (Mapping[str, IconPair]): Exact, case-sensitive file names
            (e.g. ``"Dockerfile"``).
        extensions (Mapping[str, IconPair]): Dotted extensions (e.g. ``".js"``).
        partials (tuple[tuple[str, IconPair], ...]): Substring patterns in scan
            order, most recently defined first.
        default (IconPair): Fallback pair when nothing matches.
    """

    files: MappingProxyType[str, IconPair] = field(default_factory=_frozen_map)
    extensions: MappingProxyType[str, IconPair] = field(default_factory=_frozen_map)
    partials: tuple[tuple[str, IconPair], ...] = ()
    default: IconPair = DEFAULT_PAIR

    @classmethod
    def build(
        cls,
        *,
        files: Mapping[str, IconPair] | None = None,
        extensions: Mapping[str, IconPair] | None = None,
        partials: Iterable[tuple[str, IconPair]] = (),
        default: IconPair = DEFAULT_PAIR,
    ) -> RuleTable:
        """Build a table from plain mappings, copying them into read-only views."""
        return cls(
            files=_frozen_map(files),
            extensions=_frozen_map(extensions),
            partials=tuple((pattern, IconPair(*pair)) for pattern, pair in partials),
            default=IconPair(*default),
        )

    def iter_pairs(self) -> Iterator[IconPair]:
        """Yield every pair referenced by the table, including the default."""
        yield from self.files.values()
        yield from self.extensions.values()
        for _pattern, pair in self.partials:
            yield pair
        yield self.default

    def icon_keys(self) -> set[str]:
        """Return the set of icon keys referenced anywhere in the table."""
        return {pair.icon for pair in self.iter_pairs()}

    def color_keys(self) -> set[str]:
        """Return the set of color keys referenced anywhere in the table."""
        return {pair.color for pair in self.iter_pairs()}

    def missing_icons(self, icons: Mapping[str, str]) -> list[str]:
        """Return icon keys referenced by the table but absent from ``icons``.

        A non-empty result means the two tables are out of lock-step; files that
        resolve to such keys cannot be rendered.
        """
        return sorted(key for key in self.icon_keys() if key not in icons)


@dataclass(frozen=True)
class IconData:
    """The pair of tables produced by one load, shared read-only by all callers."""

    rules: RuleTable
    icons: IconContentTable
