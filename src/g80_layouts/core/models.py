"""Domain models for g80-layouts.

Models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a couple of derived views.  They carry
zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any


# ---------------------------------------------------------------------------
# Layout record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LayoutRecord:
    """Metadata for one layout published on the sharing service."""

    id: str
    """Opaque layout identifier (the service's ``uuid``).  Cache key."""

    created_at: int
    """Publication time in seconds since the epoch."""

    creator: str = ""
    """Display name of the layout's author."""

    title: str = ""
    """Human-readable layout title."""

    notes: str = ""
    """Free-form description written by the author."""

    tags: tuple[str, ...] = ()
    """Tags used for server-side filtering."""

    unlisted: bool = False
    deleted: bool = False
    compiled: bool = False
    searchable: bool = False

    parent_id: str = ""
    """Identifier of the layout this one was derived from; empty if none."""

    firmware_api_version: str = ""
    """Firmware API version the layout targets."""

    config: Any = None
    """Opaque layout configuration payload."""

    compiler_input: Any = None
    """Opaque compiler input payload."""

    @property
    def semantic_key(self) -> tuple[str, str]:
        """``(title, creator)``; records sharing it are duplicates."""
        return (self.title, self.creator)

    def created(self, tz: tzinfo | None = None) -> datetime:
        """Return :attr:`created_at` as a datetime (local time by default)."""
        return datetime.fromtimestamp(self.created_at, tz=tz)
