"""Shared pytest fixtures and configuration for the g80-layouts test suite.

Guidelines
----------
* No internet access in any test.
* The layout service is mocked at the ``LayoutSource`` / session boundary.
* Core tests must be pure — no side effects.
* Cache files only ever live under ``tmp_path``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import platformdirs
import pytest


@pytest.fixture(autouse=True)
def _isolated_cache_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the platform cache directory into the test's temp directory."""
    cache_home = tmp_path / "user-cache"
    monkeypatch.setattr(platformdirs, "user_cache_path", lambda *_a, **_kw: cache_home)
    monkeypatch.delenv("G80_LAYOUTS_CACHE_FILE", raising=False)
    return cache_home


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so ``caplog`` sees every record."""
    yield
    logger = logging.getLogger("g80_layouts")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
