"""``requests`` backed implementation of :class:`~g80_layouts.core.protocols.LayoutSource`.

This module is the **only** place in the codebase that imports
``requests``.  All transport exceptions are caught here and re-raised
as typed :class:`~g80_layouts.exceptions.G80LayoutsError` subclasses, so
nothing raw escapes the infrastructure boundary.

Endpoints
---------
* ``GET {base_url}?tags=a,b`` — JSON array of layout ids.
* ``GET {base_url}{id}/meta`` — JSON layout document.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urljoin

from g80_layouts import config
from g80_layouts.exceptions import EnvironmentError, LayoutFetchError, LayoutSearchError
from g80_layouts.version import __version__

logger = logging.getLogger(__name__)


def _import_requests() -> Any:
    """Import requests lazily so ``--help`` works without it."""
    try:
        import requests
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "requests is not installed. Install with: pip install requests",
        ) from exc
    return requests


class MoErgoLayoutSource:
    """Concrete :class:`LayoutSource` talking to the Glove80 layout service.

    Usage::

        with MoErgoLayoutSource() as source:
            ids = source.fetch_layout_ids("colemak")
            doc = source.fetch_layout(ids[0])

    Every request is attempted exactly once.
    """

    def __init__(
        self,
        base_url: str = config.BASE_URL,
        *,
        timeout: float = config.REQUEST_TIMEOUT,
        session: Any | None = None,
    ) -> None:
        self._requests: Any = _import_requests()
        self.base_url: str = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout: float = timeout
        user_agent = f"g80-layouts/{__version__}"
        self._owns_session: bool = session is None
        if session is None:
            session = self._requests.Session()
            session.headers["User-Agent"] = user_agent
        else:
            session.headers.setdefault("User-Agent", user_agent)
        self._session: Any = session

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> MoErgoLayoutSource:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this source created it."""
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # URL construction (pure)
    # ------------------------------------------------------------------

    def layout_url(self, layout_id: str) -> str:
        return urljoin(self.base_url, f"{quote(layout_id, safe='')}/meta")

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def fetch_layout_ids(self, tags: str | None = None) -> Any:
        """Fetch the layout id list, optionally filtered by *tags*.

        Raises
        ------
        LayoutSearchError
            On connection failures, timeouts, non-2xx responses or a
            body that is not JSON.
        """
        params = {"tags": tags} if tags else None
        logger.debug("Requesting layout unique IDs: %s (params=%s)", self.base_url, params)
        try:
            return self._get_json(self.base_url, params=params)
        except self._requests.RequestException as exc:
            raise LayoutSearchError(
                f"Layout search failed: {exc}",
                hint="Check your network connection and the tag list.",
            ) from exc
        except ValueError as exc:
            raise LayoutSearchError(
                f"Layout search returned invalid JSON: {exc}",
            ) from exc

    def fetch_layout(self, layout_id: str) -> Any:
        """Fetch the metadata document for *layout_id*.

        Raises
        ------
        LayoutFetchError
            On connection failures, timeouts, non-2xx responses or a
            body that is not JSON.
        """
        url = self.layout_url(layout_id)
        logger.debug("Requesting layout: %s", url)
        try:
            return self._get_json(url)
        except self._requests.RequestException as exc:
            raise LayoutFetchError(
                f"Could not fetch layout {layout_id}: {exc}",
                layout_id=layout_id,
                hint="Re-run with --skip-errors to ignore layouts that fail.",
            ) from exc
        except ValueError as exc:
            raise LayoutFetchError(
                f"Layout {layout_id} returned invalid JSON: {exc}",
                layout_id=layout_id,
            ) from exc

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get_json(self, url: str, *, params: dict[str, str] | None = None) -> Any:
        response = self._session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
