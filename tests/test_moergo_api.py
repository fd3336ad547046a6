"""Tests for the ``requests`` backed layout source (infra/moergo_api.py).

The HTTP session is a ``MagicMock`` — no network access.

Coverage:
* URL and query construction for both endpoints.
* Timeout forwarded on every request.
* Transport / HTTP / JSON errors mapped to typed exceptions.
* Session ownership on ``close``.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from g80_layouts.exceptions import LayoutFetchError, LayoutSearchError
from g80_layouts.infra.moergo_api import MoErgoLayoutSource

BASE = "https://layouts.example.test/api/layouts/v1/"


def _session(payload: Any = None, *, error: Exception | None = None) -> MagicMock:
    """Return a mock session whose ``get`` yields *payload* as JSON."""
    session = MagicMock()
    session.headers = {}
    if error is not None:
        session.get.side_effect = error
        return session
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    session.get.return_value = response
    return session


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_trailing_slash_added(self) -> None:
        source = MoErgoLayoutSource("https://x.test/api", session=_session())
        assert source.base_url == "https://x.test/api/"

    def test_user_agent_set(self) -> None:
        session = _session()
        MoErgoLayoutSource(BASE, session=session)
        assert session.headers["User-Agent"].startswith("g80-layouts/")

    def test_layout_url(self) -> None:
        source = MoErgoLayoutSource(BASE, session=_session())
        assert source.layout_url("abc-123") == BASE + "abc-123/meta"

    def test_layout_url_quotes_id(self) -> None:
        source = MoErgoLayoutSource(BASE, session=_session())
        assert source.layout_url("a/b c") == BASE + "a%2Fb%20c/meta"


# ---------------------------------------------------------------------------
# fetch_layout_ids
# ---------------------------------------------------------------------------

class TestFetchLayoutIds:
    def test_without_tags(self) -> None:
        session = _session(["a", "b"])
        source = MoErgoLayoutSource(BASE, timeout=5, session=session)

        assert source.fetch_layout_ids() == ["a", "b"]
        session.get.assert_called_once_with(BASE, params=None, timeout=5)

    def test_with_tags(self) -> None:
        session = _session([])
        MoErgoLayoutSource(BASE, timeout=5, session=session).fetch_layout_ids("colemak,mac")
        session.get.assert_called_once_with(
            BASE, params={"tags": "colemak,mac"}, timeout=5,
        )

    def test_connection_error_mapped(self) -> None:
        session = _session(error=requests.ConnectionError("no route"))
        source = MoErgoLayoutSource(BASE, session=session)
        with pytest.raises(LayoutSearchError, match="no route") as exc_info:
            source.fetch_layout_ids()
        assert exc_info.value.hint is not None

    def test_http_error_mapped(self) -> None:
        session = _session([])
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")
        with pytest.raises(LayoutSearchError, match="503"):
            MoErgoLayoutSource(BASE, session=session).fetch_layout_ids()

    def test_invalid_json_mapped(self) -> None:
        session = _session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        with pytest.raises(LayoutSearchError, match="invalid JSON"):
            MoErgoLayoutSource(BASE, session=session).fetch_layout_ids()


# ---------------------------------------------------------------------------
# fetch_layout
# ---------------------------------------------------------------------------

class TestFetchLayout:
    def test_requests_meta_endpoint(self) -> None:
        doc = {"layout_meta": {"uuid": "abc"}}
        session = _session(doc)
        source = MoErgoLayoutSource(BASE, timeout=7, session=session)

        assert source.fetch_layout("abc") == doc
        session.get.assert_called_once_with(BASE + "abc/meta", params=None, timeout=7)

    def test_timeout_mapped(self) -> None:
        session = _session(error=requests.Timeout("read timed out"))
        with pytest.raises(LayoutFetchError, match="timed out") as exc_info:
            MoErgoLayoutSource(BASE, session=session).fetch_layout("abc")
        assert exc_info.value.layout_id == "abc"

    def test_not_found_mapped(self) -> None:
        session = _session()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError(
            "404 Client Error"
        )
        with pytest.raises(LayoutFetchError, match="404"):
            MoErgoLayoutSource(BASE, session=session).fetch_layout("abc")

    def test_invalid_json_mapped(self) -> None:
        session = _session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        with pytest.raises(LayoutFetchError, match="invalid JSON"):
            MoErgoLayoutSource(BASE, session=session).fetch_layout("abc")

    def test_single_attempt(self) -> None:
        session = _session(error=requests.ConnectionError("reset"))
        with pytest.raises(LayoutFetchError):
            MoErgoLayoutSource(BASE, session=session).fetch_layout("abc")
        assert session.get.call_count == 1


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_injected_session_not_closed(self) -> None:
        session = _session()
        with MoErgoLayoutSource(BASE, session=session):
            pass
        session.close.assert_not_called()

    def test_own_session_closed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        session = _session()
        monkeypatch.setattr(requests, "Session", lambda: session)
        with MoErgoLayoutSource(BASE):
            pass
        session.close.assert_called_once()
