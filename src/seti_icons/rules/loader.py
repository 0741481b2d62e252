# topmark:header:start
#
#   project      : Seti Icons
#   file         : loader.py
#   file_relpath : src/seti_icons/rules/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Load the rule table and icon content table.

Both tables are JSON artifacts produced by the offline build step:

- ``definitions.json``: ``files``, ``extensions``, ``partials`` and ``default``.
- ``icons.json``: icon key to SVG markup.

The bundled copies live in the ``seti_icons.data`` package and are read through
``importlib.resources``. A directory holding the same two files can be used
instead, either explicitly (``load(data_dir)``) or process-wide through the
``SETI_ICONS_DATA_DIR`` environment variable.

Notes:
    * Any missing, unreadable or malformed artifact raises
      [`seti_icons.errors.IconDataError`][]. This is a startup integrity check:
      without these tables nothing can be resolved.
    * Icon keys referenced by the rules but absent from the icon table are only
      logged; rendering such entries yields an absent result.
    * The process-wide tables are built lazily on first access and cached
      thereafter (`get_icon_data`).
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from seti_icons.config.logging import get_logger
from seti_icons.constants import (
    COLOR_ALIASES,
    DATA_DIR_ENV,
    DATA_PACKAGE,
    DEFINITIONS_FILE_NAME,
    ICONS_FILE_NAME,
)
from seti_icons.errors import IconDataError
from seti_icons.rules.model import IconContentTable, IconData, IconPair, RuleTable

if TYPE_CHECKING:
    import sys

    if sys.version_info < (3, 14):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from seti_icons.config.logging import SetiIconsLogger

logger: SetiIconsLogger = get_logger(__name__)

_REQUIRED_KEYS: tuple[str, ...] = ("files", "extensions", "partials", "default")


def normalize_color(color: str) -> str:
    """Map historical color aliases (``seti-primary``) to their canonical key."""
    return COLOR_ALIASES.get(color, color)


# --- Validation of the raw JSON shapes ---


def _as_pair(value: Any, *, where: str, source: str) -> IconPair:
    """Validate a raw ``[icon, color]`` value and return a normalized pair."""
    if (
        not isinstance(value, (list, tuple))
        or len(cast("list[Any]", value)) != 2
        or not all(isinstance(v, str) for v in cast("list[Any]", value))
    ):
        raise IconDataError(f"{where}: expected [icon, color] strings, got {value!r}", source=source)
    icon, color = cast("list[str]", value)
    return IconPair(icon, normalize_color(color))


def _as_pair_map(value: Any, *, section: str, source: str) -> dict[str, IconPair]:
    if not isinstance(value, dict):
        raise IconDataError(f"'{section}' must be an object", source=source)
    result: dict[str, IconPair] = {}
    for key, raw in cast("dict[Any, Any]", value).items():
        if not isinstance(key, str) or not key:
            raise IconDataError(f"'{section}' has an invalid key {key!r}", source=source)
        result[key] = _as_pair(raw, where=f"{section}[{key!r}]", source=source)
    return result


def _as_partials(value: Any, *, source: str) -> tuple[tuple[str, IconPair], ...]:
    if not isinstance(value, list):
        raise IconDataError("'partials' must be an array", source=source)
    partials: list[tuple[str, IconPair]] = []
    for idx, entry in enumerate(cast("list[Any]", value)):
        if not isinstance(entry, (list, tuple)) or len(cast("list[Any]", entry)) != 2:
            raise IconDataError(
                f"partials[{idx}]: expected [pattern, [icon, color]], got {entry!r}",
                source=source,
            )
        pattern, raw_pair = cast("list[Any]", entry)
        if not isinstance(pattern, str) or not pattern:
            raise IconDataError(f"partials[{idx}]: invalid pattern {pattern!r}", source=source)
        partials.append((pattern, _as_pair(raw_pair, where=f"partials[{idx}]", source=source)))
    # Stored order is the scan order; never sort.
    return tuple(partials)


def parse_definitions(data: Any, *, source: str = DEFINITIONS_FILE_NAME) -> RuleTable:
    """Validate a decoded ``definitions.json`` document and build a `RuleTable`.

    Args:
        data (Any): The decoded JSON document.
        source (str): Name used in error messages.

    Returns:
        RuleTable: The immutable rule table.

    Raises:
        IconDataError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise IconDataError("rule table must be a JSON object", source=source)
    doc = cast("dict[str, Any]", data)
    missing: list[str] = [key for key in _REQUIRED_KEYS if key not in doc]
    if missing:
        raise IconDataError(f"rule table is missing {', '.join(missing)}", source=source)

    extensions = _as_pair_map(doc["extensions"], section="extensions", source=source)
    for ext in extensions:
        if not ext.startswith("."):
            raise IconDataError(f"extension {ext!r} must start with '.'", source=source)

    return RuleTable.build(
        files=_as_pair_map(doc["files"], section="files", source=source),
        extensions=extensions,
        partials=_as_partials(doc["partials"], source=source),
        default=_as_pair(doc["default"], where="default", source=source),
    )


def parse_icons(data: Any, *, source: str = ICONS_FILE_NAME) -> IconContentTable:
    """Validate a decoded ``icons.json`` document and freeze it.

    Raises:
        IconDataError: If the document is not an object of string to string.
    """
    if not isinstance(data, dict):
        raise IconDataError("icon table must be a JSON object", source=source)
    icons: dict[str, str] = {}
    for key, markup in cast("dict[Any, Any]", data).items():
        if not isinstance(key, str) or not isinstance(markup, str):
            raise IconDataError(f"icon {key!r} must map to SVG markup text", source=source)
        icons[key] = markup
    return MappingProxyType(icons)


# --- I/O ---


def _read_json(resource: Traversable | Path) -> Any:
    source = str(resource)
    try:
        text: str = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IconDataError(f"cannot read icon data: {exc}", source=source) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise IconDataError(f"invalid JSON: {exc}", source=source) from exc


def load(data_dir: Path | str | None = None) -> tuple[RuleTable, IconContentTable]:
    """Load the rule table and icon content table.

    Args:
        data_dir (Path | str | None): Directory containing ``definitions.json``
            and ``icons.json``. When ``None`` the copies bundled with the
            package are used.

    Returns:
        tuple[RuleTable, IconContentTable]: The two immutable tables.

    Raises:
        IconDataError: If either artifact is missing or malformed.
    """
    base: Traversable | Path
    if data_dir is None:
        base = files(DATA_PACKAGE)
    else:
        base = Path(data_dir)
        if not base.is_dir():
            raise IconDataError("icon data directory does not exist", source=str(base))

    definitions_res = base.joinpath(DEFINITIONS_FILE_NAME)
    icons_res = base.joinpath(ICONS_FILE_NAME)

    rules: RuleTable = parse_definitions(_read_json(definitions_res), source=str(definitions_res))
    icons: IconContentTable = parse_icons(_read_json(icons_res), source=str(icons_res))

    logger.debug(
        "Loaded %d file rules, %d extension rules, %d partial rules and %d icons from %s",
        len(rules.files),
        len(rules.extensions),
        len(rules.partials),
        len(icons),
        base,
    )
    for icon in rules.missing_icons(icons):
        logger.warning("Icon '%s' is referenced by the rule table but has no SVG markup", icon)
    return rules, icons


@lru_cache(maxsize=1)
def get_icon_data() -> IconData:
    """Return (and cache) the process-wide icon data.

    Honors ``SETI_ICONS_DATA_DIR``; falls back to the bundled artifacts.
    """
    data_dir: str | None = os.environ.get(DATA_DIR_ENV) or None
    rules, icons = load(data_dir)
    return IconData(rules=rules, icons=icons)
