"""Pure layout deduplication.

Layouts are often re-published with the same title by the same author
(one upload per tweak).  Those copies share a *semantic key*
``(title, creator)`` and only the first one is worth showing.
"""

from __future__ import annotations

from collections.abc import Iterable

from g80_layouts.core.models import LayoutRecord


def semantic_key(record: LayoutRecord) -> tuple[str, str]:
    """Return the ``(title, creator)`` pair identifying *record*'s content."""
    return record.semantic_key


def deduplicate_layouts(
    records: Iterable[LayoutRecord],
    *,
    redupe: bool = False,
) -> list[LayoutRecord]:
    """Drop records whose semantic key was already seen.

    The **first** occurrence wins and relative order is preserved.
    With ``redupe=True`` the input is returned unchanged.
    """
    if redupe:
        return list(records)

    seen: set[tuple[str, str]] = set()
    result: list[LayoutRecord] = []
    for record in records:
        key = semantic_key(record)
        if key not in seen:
            seen.add(key)
            result.append(record)
    return result
