"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from g80_layouts.core.dedupe import deduplicate_layouts, semantic_key
from g80_layouts.core.documents import layout_from_document, layout_to_document
from g80_layouts.core.layout_service import LayoutService
from g80_layouts.core.models import LayoutRecord
from g80_layouts.core.protocols import LayoutSource
from g80_layouts.core.query import normalize_tags, select_window
from g80_layouts.core.store import LayoutStore

__all__: list[str] = [
    "LayoutRecord",
    "LayoutService",
    "LayoutSource",
    "LayoutStore",
    "deduplicate_layouts",
    "layout_from_document",
    "layout_to_document",
    "normalize_tags",
    "select_window",
    "semantic_key",
]
