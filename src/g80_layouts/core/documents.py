"""Conversion between layout JSON documents and :class:`LayoutRecord`.

The same document shape is served by the layout ``meta`` endpoint and
stored as the values of the cache file::

    {"layout_meta": {"uuid": ..., "date": ..., "title": ..., ...},
     "config": ..., "compiler_input": ...}

Decoding is lenient: absent fields fall back to empty values, exactly
as a partially filled document would.  Only a document that is not an
object at all is rejected.
"""

from __future__ import annotations

from typing import Any

from g80_layouts.core.models import LayoutRecord
from g80_layouts.exceptions import InvalidDocumentError

_FLAG_FIELDS: tuple[str, ...] = ("unlisted", "deleted", "compiled", "searchable")


# ---------------------------------------------------------------------------
# Field coercion helpers (pure)
# ---------------------------------------------------------------------------

def _as_str(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _as_int(value: object) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            return int(float(value))
    except (ValueError, OverflowError):
        # NaN and infinities have no integer value.
        return 0
    return 0


def _as_tags(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(tag) for tag in value if tag is not None)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def layout_from_document(
    document: object,
    *,
    fallback_id: str | None = None,
) -> LayoutRecord:
    """Build a :class:`LayoutRecord` from a decoded JSON document.

    Parameters
    ----------
    document:
        The decoded JSON value.
    fallback_id:
        Identifier used when the document carries no ``uuid`` (e.g. the
        identifier the document was requested or cached under).

    Raises
    ------
    InvalidDocumentError
        If *document* or its ``layout_meta`` member is not an object.
    """
    if not isinstance(document, dict):
        raise InvalidDocumentError(
            f"Expected a layout object, got {type(document).__name__}."
        )

    meta: Any = document.get("layout_meta")
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise InvalidDocumentError(
            f"Expected 'layout_meta' to be an object, got {type(meta).__name__}."
        )

    layout_id = _as_str(meta.get("uuid")) or (fallback_id or "")

    return LayoutRecord(
        id=layout_id,
        created_at=_as_int(meta.get("date")),
        creator=_as_str(meta.get("creator")),
        title=_as_str(meta.get("title")),
        notes=_as_str(meta.get("notes")),
        tags=_as_tags(meta.get("tags")),
        parent_id=_as_str(meta.get("parent_uuid")),
        firmware_api_version=_as_str(meta.get("firmware_api_version")),
        config=document.get("config"),
        compiler_input=document.get("compiler_input"),
        **{flag: bool(meta.get(flag, False)) for flag in _FLAG_FIELDS},
    )


def layout_to_document(record: LayoutRecord) -> dict[str, Any]:
    """Serialise *record* back into the service's document shape."""
    meta: dict[str, Any] = {
        "uuid": record.id,
        "date": record.created_at,
        "creator": record.creator,
        "parent_uuid": record.parent_id,
        "firmware_api_version": record.firmware_api_version,
        "title": record.title,
        "notes": record.notes,
        "tags": list(record.tags),
    }
    for flag in _FLAG_FIELDS:
        meta[flag] = getattr(record, flag)
    return {
        "layout_meta": meta,
        "config": record.config,
        "compiler_input": record.compiler_input,
    }
