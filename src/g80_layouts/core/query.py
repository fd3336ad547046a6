"""Search query helpers: tag normalisation and the selection window."""

from __future__ import annotations

from collections.abc import Sequence

from g80_layouts.exceptions import InvalidWindowError


def normalize_tags(raw: str | None) -> str | None:
    """Clean a comma-separated tag list for the ``tags`` query parameter.

    Whitespace around each tag is stripped and empty entries dropped.
    Returns ``None`` when no tag remains, meaning "no filter".
    """
    if raw is None:
        return None
    tags = [tag.strip() for tag in raw.split(",")]
    kept = [tag for tag in tags if tag]
    if not kept:
        return None
    return ",".join(kept)


def select_window(ids: Sequence[str], offset: int, limit: int) -> list[str]:
    """Skip the first *offset* ids, then take at most *limit*.

    An *offset* past the end yields an empty list.

    Raises
    ------
    InvalidWindowError
        If *offset* or *limit* is negative.
    """
    if offset < 0:
        raise InvalidWindowError(f"offset must not be negative (got {offset}).")
    if limit < 0:
        raise InvalidWindowError(f"limit must not be negative (got {limit}).")
    if offset >= len(ids):
        return []
    return list(ids[offset : offset + limit])
