"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class LayoutSource(Protocol):
    """Contract for the remote layout sharing service.

    Any object that implements both methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def fetch_layout_ids(self, tags: str | None = None) -> Any:
        """Return the decoded JSON list of layout identifiers.

        Parameters
        ----------
        tags:
            Comma-separated tag filter, or ``None`` for no filter.

        Implementations must map all transport exceptions to
        :class:`~g80_layouts.exceptions.LayoutSearchError`.
        """
        ...  # pragma: no cover

    def fetch_layout(self, layout_id: str) -> Any:
        """Return the decoded JSON metadata document for *layout_id*.

        Implementations must map all transport exceptions to
        :class:`~g80_layouts.exceptions.LayoutFetchError`.
        """
        ...  # pragma: no cover
