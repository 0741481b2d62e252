# topmark:header:start
#
#   project      : Seti Icons
#   file         : utils.py
#   file_relpath : src/seti_icons/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Rendering helpers for CLI output (Markdown tables, JSON emission)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from seti_icons.cli.options import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from seti_icons.cli.console import ConsoleLike


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to alignment: ``"left"`` (default),
        ``"right"``, or ``"center"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style = (align or {}).get(i, "left").lower()
        w = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    header_line = " | ".join(f"{headers[i]:<{widths[i]}}" for i in range(ncols))
    sep_line = " | ".join(_sep_for(i) for i in range(ncols))
    data_lines = [" | ".join(f"{str(r[i]):<{widths[i]}}" for i in range(ncols)) for r in rows]

    return (
        f"| {header_line} |\n| {sep_line} |\n"
        + "\n".join(f"| {line} |" for line in data_lines)
        + "\n"
    )


def emit_machine(
    console: ConsoleLike,
    records: Sequence[Mapping[str, Any]],
    *,
    fmt: OutputFormat,
) -> None:
    """Print ``records`` as a JSON array or as NDJSON lines."""
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(list(records), indent=2))
    else:
        for record in records:
            console.print(json.dumps(record))


def emit_document(console: ConsoleLike, document: Mapping[str, Any]) -> None:
    """Print a single JSON object (indented)."""
    console.print(json.dumps(dict(document), indent=2))
