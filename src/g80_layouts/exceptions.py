"""Custom exception hierarchy for g80-layouts.

All exceptions that cross layer boundaries must inherit from
:class:`G80LayoutsError`.  Raw third-party exceptions (e.g. from
``requests``) must NEVER propagate beyond the infrastructure layer;
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
G80LayoutsError
├── InvalidWindowError
├── InvalidDocumentError
├── LayoutSearchError
├── LayoutFetchError
├── CacheError
│   └── CacheCorruptError
└── EnvironmentError
"""

from __future__ import annotations


class G80LayoutsError(Exception):
    """Base exception for all g80-layouts errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Selection window -------------------------------------------------------

class InvalidWindowError(G80LayoutsError):
    """Raised when ``offset`` or ``limit`` is negative."""


# --- Document decoding ------------------------------------------------------

class InvalidDocumentError(G80LayoutsError):
    """Raised when a JSON document does not have the layout shape."""


# --- Remote service ---------------------------------------------------------

class LayoutSearchError(G80LayoutsError):
    """Raised when the list of layout identifiers cannot be retrieved."""


class LayoutFetchError(G80LayoutsError):
    """Raised when a single layout's metadata cannot be retrieved or parsed."""

    def __init__(
        self,
        message: str,
        *,
        layout_id: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.layout_id: str | None = layout_id


# --- Local cache ------------------------------------------------------------

class CacheError(G80LayoutsError):
    """Raised for problems with the on-disk layout cache."""


class CacheCorruptError(CacheError):
    """Raised when the cache file exists but cannot be read or parsed."""


# --- Environment / tooling --------------------------------------------------

class EnvironmentError(G80LayoutsError):
    """Raised when a required runtime dependency is not available."""


def cache_reset_hint(path: object) -> str:
    """Return guidance for recovering from a broken cache file."""
    return "\n".join(
        (
            "The layout cache can be rebuilt from the service at any time.",
            f"Delete it and run again:  rm {path}",
        )
    )
