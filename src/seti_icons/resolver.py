# topmark:header:start
#
#   project      : Seti Icons
#   file         : resolver.py
#   file_relpath : src/seti_icons/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Resolve a file name to an ``(icon key, color key)`` pair.

Resolution is a total, pure function of the file name and the rule table. Tiers
are tried in strict precedence order and the first hit wins:

1. **Exact**: the whole file name is a key of ``files`` (case-sensitive).
2. **Extension**: everything from the *last* ``.`` to the end (``"a.tar.gz"``
   gives ``".gz"``) is a key of ``extensions``. Names without a dot skip this tier.
3. **Partial**: the first ``partials`` pattern, in stored order, that occurs
   anywhere in the file name. Overlapping patterns are decided by that order
   alone, not by match length.
4. **Default**: the table's fallback pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from seti_icons.config.logging import get_logger
from seti_icons.rules.loader import get_icon_data
from seti_icons.rules.model import IconPair, MatchTier, RuleMatch

if TYPE_CHECKING:
    from seti_icons.config.logging import SetiIconsLogger
    from seti_icons.rules.model import RuleTable

logger: SetiIconsLogger = get_logger(__name__)


def extension_of(file_name: str) -> str | None:
    """Return the extension of ``file_name``, dot included, or None.

    The extension runs from the last ``.`` to the end of the name, so
    ``"app.test.js"`` yields ``".js"`` and ``".gitignore"`` yields itself.
    """
    idx: int = file_name.rfind(".")
    if idx < 0:
        return None
    return file_name[idx:]


def match(file_name: str, *, rules: RuleTable | None = None) -> RuleMatch:
    """Match ``file_name`` against the rule table and report the deciding tier.

    Args:
        file_name (str): A bare file name or extension (no directory part is
            stripped; callers pass the base name).
        rules (RuleTable | None): Table to match against. Defaults to the
            process-wide bundled table.

    Returns:
        RuleMatch: The resolved pair with the tier and key that produced it.
    """
    table: RuleTable = rules if rules is not None else get_icon_data().rules

    pair: IconPair | None = table.files.get(file_name)
    if pair is not None:
        logger.trace("'%s': exact file match", file_name)
        return RuleMatch(pair, MatchTier.EXACT, file_name)

    ext: str | None = extension_of(file_name)
    if ext is not None:
        pair = table.extensions.get(ext)
        if pair is not None:
            logger.trace("'%s': extension match on '%s'", file_name, ext)
            return RuleMatch(pair, MatchTier.EXTENSION, ext)

    for pattern, partial_pair in table.partials:
        if pattern in file_name:
            logger.trace("'%s': partial match on '%s'", file_name, pattern)
            return RuleMatch(partial_pair, MatchTier.PARTIAL, pattern)

    logger.trace("'%s': no rule matched, using default", file_name)
    return RuleMatch(table.default, MatchTier.DEFAULT, None)


def resolve(file_name: str, *, rules: RuleTable | None = None) -> IconPair:
    """Resolve ``file_name`` to its ``(icon key, color key)`` pair.

    Never fails: when nothing matches, the table's default pair is returned.
    """
    return match(file_name, rules=rules).pair
