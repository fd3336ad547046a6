"""Layout table rendering for the CLI layer.

Renders one row per layout with the columns Date, Title, Notes and
Author.  Rich is used when installed; otherwise a plain fixed-width
table is written.  The table always goes to stdout so it can be piped.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import tzinfo
from typing import Any, TextIO

from g80_layouts.core.models import LayoutRecord

COLUMNS: tuple[str, ...] = ("Date", "Title", "Notes", "Author")
UNKNOWN_DATE: str = "?"


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_date(record: LayoutRecord, tz: tzinfo | None = None) -> str:
    """Render the publication date as ``M/D/YY`` without zero padding.

    Timestamps outside the platform's datetime range render as
    :data:`UNKNOWN_DATE`.
    """
    try:
        created = record.created(tz)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_DATE
    return f"{created.month}/{created.day}/{created:%y}"


def layout_row(record: LayoutRecord, tz: tzinfo | None = None) -> tuple[str, str, str, str]:
    """Return the ``(date, title, notes, author)`` cells for *record*."""
    return (format_date(record, tz), record.title, record.notes, record.creator)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _import_rich() -> tuple[type[Any], type[Any], type[Any]] | None:
    try:
        from rich.console import Console
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        return None
    return Console, Table, Text


def _render_plain(rows: Sequence[tuple[str, ...]], out: TextIO) -> None:
    widths = [len(name) for name in COLUMNS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    print(line(COLUMNS), file=out)
    print("-+-".join("-" * w for w in widths), file=out)
    for row in rows:
        print(line(row), file=out)


def render_layouts(
    records: Sequence[LayoutRecord],
    *,
    out: TextIO | None = None,
    tz: tzinfo | None = None,
) -> None:
    """Print *records* as a table to *out* (stdout by default)."""
    stream = out if out is not None else sys.stdout
    rows = [layout_row(record, tz) for record in records]

    rich_classes = _import_rich()
    if rich_classes is None:
        _render_plain(rows, stream)
        return

    console_class, table_class, text_class = rich_classes
    table = table_class(show_header=True, header_style="bold cyan", border_style="dim")
    table.add_column("Date", justify="right", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Notes", overflow="fold")
    table.add_column("Author")
    for row in rows:
        # Text cells keep brackets in titles from being read as markup.
        table.add_row(*(text_class(cell) for cell in row))

    console_class(file=stream).print(table)
