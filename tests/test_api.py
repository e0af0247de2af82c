"""Tests for the content and categorize API endpoints.

The fetch pipeline and tagger are patched, so no network or NLTK data is
needed.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from suprnews.api.app import create_app
from suprnews.errors import FailureKind
from suprnews.scraper.models import UNAVAILABLE, ExtractionMethod, FetchOutcome


_URL = "https://news.example.com/story"


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


def _all_nouns(text: str):
    return [(token, "NN") for token in text.split()]


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# /content
# ---------------------------------------------------------------------------

class TestContentEndpoint:
    def test_returns_extracted_content(self, client: TestClient) -> None:
        outcome = FetchOutcome(
            url=_URL,
            content="<p>Story body</p>",
            method=ExtractionMethod.FALLBACK,
            fell_back=True,
        )
        with patch("suprnews.api.routers.content.fetch_article", return_value=outcome) as fetch:
            resp = client.get("/content", params={"url": _URL})

        fetch.assert_called_once_with(_URL)
        assert resp.status_code == 200
        assert resp.json() == {
            "url": _URL,
            "content": "<p>Story body</p>",
            "available": True,
            "method": "fallback",
            "fell_back": True,
        }

    def test_unavailable_is_not_an_error(self, client: TestClient) -> None:
        outcome = FetchOutcome(url=_URL, content=UNAVAILABLE, failure=FailureKind.NETWORK)
        with patch("suprnews.api.routers.content.fetch_article", return_value=outcome):
            resp = client.get("/content", params={"url": _URL})

        assert resp.status_code == 200
        body = resp.json()
        assert body["content"] == UNAVAILABLE
        assert body["available"] is False
        assert body["method"] is None

    def test_unexpected_pipeline_error_is_not_a_500(self, client: TestClient) -> None:
        with patch(
            "suprnews.scraper.fetcher.fetch_with_readability",
            side_effect=RuntimeError("boom"),
        ):
            resp = client.get("/content", params={"url": _URL})

        assert resp.status_code == 200
        body = resp.json()
        assert body["available"] is False
        assert body["content"] == UNAVAILABLE

    def test_invalid_url_rejected(self, client: TestClient) -> None:
        resp = client.get("/content", params={"url": "not a url"})
        assert resp.status_code == 422

    def test_display_prefers_fresh_content(self, client: TestClient) -> None:
        with patch("suprnews.display.fetch_article_content", return_value="<p>Fresh</p>"):
            resp = client.post(
                "/content/display",
                json={"url": _URL, "stored_summary": "Old summary"},
            )
        assert resp.status_code == 200
        assert resp.json() == {"url": _URL, "content": "<p>Fresh</p>"}

    def test_display_falls_back_to_summary(self, client: TestClient) -> None:
        with patch("suprnews.display.fetch_article_content", return_value=UNAVAILABLE):
            resp = client.post(
                "/content/display",
                json={"url": _URL, "stored_summary": "Old summary"},
            )
        assert resp.json()["content"] == "Old summary"


# ---------------------------------------------------------------------------
# /categorize
# ---------------------------------------------------------------------------

class TestCategorizeEndpoint:
    def test_feed_tag_override(self, client: TestClient) -> None:
        resp = client.post(
            "/categorize",
            json={"title": "Anything", "categories": ["Tech News"], "feed_name": "Daily"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"category": "technology", "source": "feed_tags", "scores": {}}

    def test_feed_name_override(self, client: TestClient) -> None:
        resp = client.post("/categorize", json={"title": "Anything", "feed_name": "ESPN Sports"})
        assert resp.json()["category"] == "sports"
        assert resp.json()["source"] == "feed_name"

    def test_keyword_categorizer(self, client: TestClient) -> None:
        with patch("suprnews.classify.categorizer.tag_tokens", side_effect=_all_nouns):
            resp = client.post(
                "/categorize",
                json={"title": "Election", "description": "senate vote"},
            )
        body = resp.json()
        assert body["category"] == "politics"
        assert body["source"] == "nlp"
        assert body["scores"]["politics"] == pytest.approx(2.6)

    def test_empty_body_is_other(self, client: TestClient) -> None:
        with patch("suprnews.classify.categorizer.tag_tokens", side_effect=_all_nouns):
            resp = client.post("/categorize", json={})
        assert resp.json() == {"category": "other", "source": "nlp", "scores": {}}
