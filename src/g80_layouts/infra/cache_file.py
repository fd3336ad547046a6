"""Infrastructure: persisting the layout store as a JSON file.

The cache file is a single JSON object mapping layout ids to layout
documents.  It is read once at start-up and written once at shutdown.

Rules
-----
* A missing file is an empty cache, not an error.
* A file that exists but cannot be parsed is fatal
  (:class:`~g80_layouts.exceptions.CacheCorruptError`).
* A failed save is logged and swallowed: the results were already
  shown to the user.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from g80_layouts.core.store import LayoutStore
from g80_layouts.exceptions import CacheCorruptError, InvalidDocumentError, cache_reset_hint

logger = logging.getLogger(__name__)

CACHE_FILE_MODE: int = 0o644


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

def load_store(path: Path) -> LayoutStore:
    """Read the cache at *path* into a :class:`LayoutStore`.

    Raises
    ------
    CacheCorruptError
        If the file exists but is unreadable, is not JSON, is not a JSON
        object, or holds an entry that is not a layout document.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No layout cache at %s, starting empty.", path)
        return LayoutStore()
    except OSError as exc:
        raise CacheCorruptError(
            f"Could not read layout cache {path}: {exc}",
            hint=cache_reset_hint(path),
        ) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CacheCorruptError(
            f"Layout cache {path} is not valid JSON: {exc}",
            hint=cache_reset_hint(path),
        ) from exc

    if not isinstance(data, dict):
        raise CacheCorruptError(
            f"Layout cache {path} must contain a JSON object.",
            hint=cache_reset_hint(path),
        )

    try:
        store = LayoutStore.from_documents(data)
    except InvalidDocumentError as exc:
        raise CacheCorruptError(
            f"Layout cache {path} holds an invalid entry: {exc}",
            hint=cache_reset_hint(path),
        ) from exc

    logger.debug("Loaded %d cached layouts from %s", len(store), path)
    return store


# ---------------------------------------------------------------------------
# Save
# ---------------------------------------------------------------------------

def save_store(store: LayoutStore, path: Path) -> bool:
    """Write *store* to *path*, replacing the previous file atomically.

    Returns ``True`` on success.  Any ``OSError`` is logged and
    ``False`` is returned; nothing is raised.
    """
    payload = json.dumps(store.to_documents(), ensure_ascii=False)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        os.chmod(tmp_name, CACHE_FILE_MODE)
        os.replace(tmp_name, path)
    except OSError as exc:
        logger.warning("Could not write cache to disk: %s", exc)
        if tmp_name is not None:
            _discard(Path(tmp_name))
        return False

    logger.debug("Successfully wrote %d layouts to %s", len(store), path)
    return True


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.debug("Could not remove temporary cache file %s: %s", tmp_path, exc)


# ---------------------------------------------------------------------------
# Inspection (used by ``--doctor``)
# ---------------------------------------------------------------------------

def describe_cache(path: Path) -> tuple[bool, str]:
    """Return ``(healthy, description)`` for the cache at *path*."""
    if not path.exists():
        return True, "absent (will be created)"
    try:
        store = load_store(path)
    except CacheCorruptError:
        return False, "corrupt"
    return True, f"{len(store)} layouts"
