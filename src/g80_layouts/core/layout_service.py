"""Core layout service — search, then resolve ids through the cache.

The service depends on a :class:`~g80_layouts.core.protocols.LayoutSource`
and a :class:`~g80_layouts.core.store.LayoutStore`, both injected at
construction time, keeping the core free of any network or filesystem
imports.

Guarantees
----------
* A cached layout is returned without touching the source.
* A cache miss costs exactly one ``fetch_layout`` call and one ``put``.
* Only :class:`~g80_layouts.exceptions.G80LayoutsError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from g80_layouts.core.documents import layout_from_document
from g80_layouts.core.models import LayoutRecord
from g80_layouts.core.protocols import LayoutSource
from g80_layouts.core.store import LayoutStore
from g80_layouts.exceptions import (
    G80LayoutsError,
    InvalidDocumentError,
    LayoutFetchError,
    LayoutSearchError,
)

logger = logging.getLogger(__name__)


class LayoutService:
    """Resolves layout ids to records, writing fetched records through
    to the store.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`LayoutSource` protocol.
    store:
        The layout cache shared for the whole run.
    """

    def __init__(self, source: LayoutSource, store: LayoutStore) -> None:
        self._source: LayoutSource = source
        self._store: LayoutStore = store

    @property
    def store(self) -> LayoutStore:
        return self._store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def search(self, tags: str | None = None) -> list[str]:
        """Return the ordered layout ids matching *tags*.

        Raises
        ------
        LayoutSearchError
            If the source fails or returns something other than a list
            of strings.
        """
        try:
            raw = self._source.fetch_layout_ids(tags)
        except G80LayoutsError:
            raise
        except Exception as exc:
            raise LayoutSearchError(f"Unexpected search error: {exc}") from exc

        return self._parse_ids(raw)

    def resolve(self, layout_id: str) -> LayoutRecord:
        """Return the record for *layout_id*, from the cache when possible.

        Raises
        ------
        LayoutFetchError
            If the layout is not cached and cannot be fetched or parsed.
        """
        cached = self._store.get(layout_id)
        if cached is not None:
            logger.debug("Cache hit for layout %s", layout_id)
            return cached

        document = self._fetch(layout_id)
        try:
            record = layout_from_document(document, fallback_id=layout_id)
        except InvalidDocumentError as exc:
            raise LayoutFetchError(
                f"Layout {layout_id} has an unexpected format: {exc}",
                layout_id=layout_id,
            ) from exc

        self._store.put(layout_id, record)
        return record

    def resolve_many(
        self,
        layout_ids: Iterable[str],
        *,
        skip_errors: bool = False,
    ) -> list[LayoutRecord]:
        """Resolve *layout_ids* in order, one at a time.

        With ``skip_errors=True`` a layout that cannot be fetched is
        logged and left out instead of aborting the whole run.
        """
        records: list[LayoutRecord] = []
        for layout_id in layout_ids:
            try:
                records.append(self.resolve(layout_id))
            except LayoutFetchError as exc:
                if not skip_errors:
                    raise
                logger.warning("Skipping layout %s: %s", layout_id, exc)
        return records

    # ------------------------------------------------------------------
    # Source delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, layout_id: str) -> Any:
        try:
            return self._source.fetch_layout(layout_id)
        except G80LayoutsError:
            raise
        except Exception as exc:
            raise LayoutFetchError(
                f"Unexpected error fetching layout {layout_id}: {exc}",
                layout_id=layout_id,
            ) from exc

    @staticmethod
    def _parse_ids(raw: Any) -> list[str]:
        if not isinstance(raw, list):
            raise LayoutSearchError(
                f"Expected a list of layout ids, got {type(raw).__name__}.",
            )
        if not all(isinstance(item, str) for item in raw):
            raise LayoutSearchError("Layout id list contains non-string entries.")
        return list(raw)
