"""Configuration: service endpoint, request timeout, cache location.

Values are read from the environment once at import time.  The CLI
may still override the cache location per invocation.
"""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

# Remote service
BASE_URL: str = os.getenv(
    "G80_LAYOUTS_BASE_URL", "https://my.glove80.com/api/layouts/v1/"
)
REQUEST_TIMEOUT: float = float(os.getenv("G80_LAYOUTS_TIMEOUT", "30"))  # seconds

# Cache
CACHE_FILE_NAME: str = "g80-layouts-cache.json"
CACHE_FILE_ENV: str = "G80_LAYOUTS_CACHE_FILE"

# Presentation
DEFAULT_LIMIT: int = 10
DEFAULT_OFFSET: int = 0


def platform_cache_dir() -> Path:
    """Return the per-user cache directory for this platform.

    ``$XDG_CACHE_HOME`` (or ``~/.cache``) on Linux, ``~/Library/Caches``
    on macOS and ``%LOCALAPPDATA%`` on Windows.
    """
    return platformdirs.user_cache_path()


def default_cache_path(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the cache file location.

    Precedence: explicit *override* → ``G80_LAYOUTS_CACHE_FILE`` →
    ``<platform cache dir>/g80-layouts-cache.json``.
    """
    if override:
        return Path(override).expanduser()
    from_env = os.environ.get(CACHE_FILE_ENV)
    if from_env:
        return Path(from_env).expanduser()
    return platform_cache_dir() / CACHE_FILE_NAME
