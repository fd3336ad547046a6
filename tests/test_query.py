"""Tests for tag normalisation and the selection window (core/query.py)."""

from __future__ import annotations

import pytest

from g80_layouts.core.query import normalize_tags, select_window
from g80_layouts.exceptions import InvalidWindowError

IDS = ["a", "b", "c", "d", "e", "f"]


class TestSelectWindow:
    def test_offset_and_limit(self) -> None:
        assert select_window(IDS, offset=2, limit=3) == ["c", "d", "e"]

    def test_full_list(self) -> None:
        assert select_window(IDS, offset=0, limit=len(IDS)) == IDS

    def test_limit_past_end_is_truncated(self) -> None:
        assert select_window(IDS, offset=4, limit=10) == ["e", "f"]

    @pytest.mark.parametrize("offset", [6, 7, 100])
    def test_offset_past_end_is_empty(self, offset: int) -> None:
        assert select_window(IDS, offset=offset, limit=10) == []

    def test_zero_limit(self) -> None:
        assert select_window(IDS, offset=0, limit=0) == []

    def test_empty_ids(self) -> None:
        assert select_window([], offset=0, limit=10) == []

    def test_returns_copy(self) -> None:
        ids = list(IDS)
        window = select_window(ids, offset=0, limit=10)
        window.append("z")
        assert ids == IDS

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(InvalidWindowError, match="offset"):
            select_window(IDS, offset=-1, limit=3)

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(InvalidWindowError, match="limit"):
            select_window(IDS, offset=0, limit=-3)


class TestNormalizeTags:
    def test_none_means_no_filter(self) -> None:
        assert normalize_tags(None) is None

    def test_single_tag(self) -> None:
        assert normalize_tags("colemak") == "colemak"

    def test_strips_whitespace(self) -> None:
        assert normalize_tags(" colemak , mac ") == "colemak,mac"

    def test_drops_empty_entries(self) -> None:
        assert normalize_tags("colemak,,mac,") == "colemak,mac"

    @pytest.mark.parametrize("raw", ["", " ", ",", " , ,"])
    def test_blank_means_no_filter(self, raw: str) -> None:
        assert normalize_tags(raw) is None
