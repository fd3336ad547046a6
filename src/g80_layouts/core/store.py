"""In-memory layout store — the identifier → record cache.

The store never touches the filesystem; loading and saving live in
:mod:`g80_layouts.infra.cache_file`.  It is passed explicitly to the
services that use it instead of living in module-level state.

Entries never expire: layouts are treated as immutable once published,
so a cached record is trusted for the life of the cache file.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from g80_layouts.core.documents import layout_from_document, layout_to_document
from g80_layouts.core.models import LayoutRecord


class LayoutStore:
    """Mutable mapping from layout id to :class:`LayoutRecord`.

    ``put`` always overwrites, so a later write for the same id wins.
    """

    def __init__(self, records: Mapping[str, LayoutRecord] | None = None) -> None:
        self._records: dict[str, LayoutRecord] = dict(records or {})
        self._dirty: bool = False

    # ------------------------------------------------------------------
    # Mapping-ish protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, layout_id: object) -> bool:
        return layout_id in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"LayoutStore({len(self)} layouts)"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def dirty(self) -> bool:
        """Whether the store changed since it was loaded."""
        return self._dirty

    def get(self, layout_id: str) -> LayoutRecord | None:
        """Return the cached record for *layout_id*, or ``None``."""
        return self._records.get(layout_id)

    def put(self, layout_id: str, record: LayoutRecord) -> None:
        """Insert or overwrite the entry for *layout_id*."""
        self._records[layout_id] = record
        self._dirty = True

    # ------------------------------------------------------------------
    # Document conversion
    # ------------------------------------------------------------------

    def to_documents(self) -> dict[str, dict[str, Any]]:
        """Return the JSON-ready ``{id: layout document}`` mapping."""
        return {
            layout_id: layout_to_document(record)
            for layout_id, record in self._records.items()
        }

    @classmethod
    def from_documents(cls, documents: Mapping[str, object]) -> LayoutStore:
        """Build a store from a ``{id: layout document}`` mapping.

        Raises
        ------
        InvalidDocumentError
            If any value is not a layout document.
        """
        return cls(
            {
                str(layout_id): layout_from_document(doc, fallback_id=str(layout_id))
                for layout_id, doc in documents.items()
            }
        )
