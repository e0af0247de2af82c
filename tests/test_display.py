"""Tests for display-side content substitution."""

from __future__ import annotations

from unittest.mock import MagicMock

from suprnews.display import (
    original_link_message,
    resolve_display_content,
    safe_content,
    undisplayable_message,
)
from suprnews.scraper.models import UNAVAILABLE


_URL = "https://news.example.com/story?id=1&ref=feed"
_GOOD = "<p>Markets rallied on Friday after the announcement.</p>"
_GARBLED = "é€ü" * 50


class TestSafeContent:
    def test_clean_content_passes_through(self) -> None:
        assert safe_content(_GOOD, _URL) == _GOOD

    def test_replacement_characters_removed(self) -> None:
        assert safe_content("<p>caf\ufffd au lait, served hot</p>") == "<p>caf au lait, served hot</p>"

    def test_garbled_content_replaced(self) -> None:
        out = safe_content(_GARBLED, _URL)
        assert out == undisplayable_message(_URL)
        assert "couldn't properly display" in out

    def test_short_content_is_not_checked(self) -> None:
        assert safe_content("ééé") == "ééé"

    def test_message_escapes_url(self) -> None:
        assert "id=1&amp;ref=feed" in undisplayable_message(_URL)


class TestResolveDisplayContent:
    def test_fresh_content_wins(self) -> None:
        fetcher = MagicMock(return_value=_GOOD)
        assert resolve_display_content(_URL, "stored summary", fetcher) == _GOOD
        fetcher.assert_called_once_with(_URL)

    def test_sentinel_keeps_stored_summary(self) -> None:
        fetcher = MagicMock(return_value=UNAVAILABLE)
        assert resolve_display_content(_URL, "stored summary", fetcher) == "stored summary"

    def test_garbled_fetch_keeps_stored_summary(self) -> None:
        fetcher = MagicMock(return_value=_GARBLED)
        assert resolve_display_content(_URL, "stored summary", fetcher) == "stored summary"

    def test_both_garbled_links_to_original(self) -> None:
        fetcher = MagicMock(return_value=UNAVAILABLE)
        out = resolve_display_content(_URL, _GARBLED, fetcher)
        assert out == original_link_message(_URL)
        assert "View the original article" in out
