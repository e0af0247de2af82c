"""Tests for the fetch orchestrator (HTTP + primary/fallback state machine).

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
- The extraction stages are patched on ``suprnews.scraper.fetcher`` to observe
  whether (and how often) each one runs.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import respx

from suprnews.errors import FailureKind, GarbledContent, ParseFailure
from suprnews.scraper.fetcher import fetch_article, fetch_article_content
from suprnews.scraper.models import UNAVAILABLE, ExtractionMethod, ExtractionResult


_URL = "https://news.example.com/story"

_PARAGRAPH = (
    "The city council voted late on Monday to approve the new transit plan, "
    "which will add three bus lines and extend service hours across the "
    "northern districts, officials said after the meeting concluded."
)

_ARTICLE_HTML = f"""\
<!DOCTYPE html>
<html>
<head><title>Transit Plan Approved</title></head>
<body>
  <nav>Home | Local | World</nav>
  <article>
    <h1>Transit Plan Approved</h1>
    <p>{_PARAGRAPH}</p>
    <p>{_PARAGRAPH}</p>
    <p>{_PARAGRAPH}</p>
  </article>
  <footer>All rights reserved</footer>
</body>
</html>
"""


def _html_response(html: str = _ARTICLE_HTML, **kwargs) -> httpx.Response:
    headers = kwargs.pop("headers", {"Content-Type": "text/html; charset=utf-8"})
    return httpx.Response(200, content=html.encode("utf-8"), headers=headers, **kwargs)


# ---------------------------------------------------------------------------
# Terminal failures
# ---------------------------------------------------------------------------

class TestTerminalFailures:
    def test_http_404_returns_sentinel_without_extraction(self) -> None:
        primary = MagicMock()
        fallback = MagicMock()
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(404))
            with patch("suprnews.scraper.fetcher.extract_primary", primary), \
                 patch("suprnews.scraper.fetcher.extract_fallback", fallback):
                outcome = fetch_article(_URL)

        assert outcome.content == UNAVAILABLE
        assert outcome.failure is FailureKind.NETWORK
        assert outcome.fell_back is False
        assert route.call_count == 1
        primary.assert_not_called()
        fallback.assert_not_called()

    def test_server_error_returns_sentinel(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(503))
            assert fetch_article_content(_URL) == UNAVAILABLE

    def test_connect_error_returns_sentinel(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("refused"))
            outcome = fetch_article(_URL)
        assert outcome.content == UNAVAILABLE
        assert outcome.failure is FailureKind.NETWORK

    def test_timeout_returns_sentinel(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ReadTimeout("slow"))
            assert fetch_article_content(_URL) == UNAVAILABLE

    def test_redirect_loop_returns_sentinel(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(
                return_value=httpx.Response(302, headers={"Location": _URL})
            )
            outcome = fetch_article(_URL)
        assert outcome.content == UNAVAILABLE
        assert outcome.failure is FailureKind.NETWORK

    def test_binary_body_is_rejected_without_fallback(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(
                return_value=httpx.Response(
                    200,
                    content=b"%PDF-1.7\n<html><body>looks like html</body></html>",
                    headers={"Content-Type": "text/html"},
                )
            )
            outcome = fetch_article(_URL)
        assert outcome.content == UNAVAILABLE
        assert outcome.failure is FailureKind.REJECTED
        assert outcome.fell_back is False
        assert route.call_count == 1

    def test_invalid_url_returns_sentinel(self) -> None:
        assert fetch_article_content("not a url") == UNAVAILABLE

    def test_unexpected_exception_returns_sentinel(self) -> None:
        with patch(
            "suprnews.scraper.fetcher.fetch_with_readability",
            side_effect=RuntimeError("boom"),
        ), patch("suprnews.scraper.fetcher.fetch_plain_html") as fallback:
            outcome = fetch_article(_URL)

        assert outcome.content == UNAVAILABLE
        assert outcome.failure is FailureKind.INTERNAL
        fallback.assert_not_called()

    def test_unexpected_fallback_exception_returns_sentinel(self) -> None:
        with patch(
            "suprnews.scraper.fetcher.fetch_with_readability",
            side_effect=ParseFailure("nothing found", url=_URL),
        ), patch(
            "suprnews.scraper.fetcher.fetch_plain_html",
            side_effect=AttributeError("lxml internals"),
        ):
            assert fetch_article_content(_URL) == UNAVAILABLE

    def test_non_text_charset_is_not_fatal(self) -> None:
        html = _ARTICLE_HTML.replace("<head>", '<head><meta charset="hex">')
        with respx.mock:
            respx.get(_URL).mock(
                return_value=httpx.Response(
                    200, content=html.encode("utf-8"), headers={"Content-Type": "text/html"}
                )
            )
            outcome = fetch_article(_URL)
        assert outcome.available
        assert "transit plan" in outcome.content


# ---------------------------------------------------------------------------
# Primary path
# ---------------------------------------------------------------------------

class TestPrimaryPath:
    def test_clean_primary_skips_fallback(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=_html_response())
            with patch("suprnews.scraper.fetcher.fetch_plain_html") as fallback:
                outcome = fetch_article(_URL)

        fallback.assert_not_called()
        assert outcome.method is ExtractionMethod.PRIMARY
        assert outcome.fell_back is False
        assert outcome.available
        assert "transit plan" in outcome.content

    def test_windows_1252_page_is_transcoded(self) -> None:
        html = _ARTICLE_HTML.replace("officials said", "officials said at the café")
        with respx.mock:
            respx.get(_URL).mock(
                return_value=httpx.Response(
                    200,
                    content=html.encode("cp1252"),
                    headers={"Content-Type": "text/html; charset=windows-1252"},
                )
            )
            content = fetch_article_content(_URL)
        assert "café" in content

    def test_primary_sends_browser_headers(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=_html_response())
            fetch_article(_URL)
        request = route.calls[0].request
        assert request.headers["Accept-Language"] == "en-US,en;q=0.5"
        assert request.headers["Upgrade-Insecure-Requests"] == "1"
        assert "Chrome" in request.headers["User-Agent"]


# ---------------------------------------------------------------------------
# Fallback path
# ---------------------------------------------------------------------------

class TestFallbackPath:
    def test_garbled_primary_triggers_single_fallback(self) -> None:
        fallback_result = ExtractionResult(
            content="<div class=\"article-content\">é é é é é é</div>",
            method=ExtractionMethod.FALLBACK,
        )
        with patch(
            "suprnews.scraper.fetcher.fetch_with_readability",
            side_effect=GarbledContent("still garbled", url=_URL),
        ), patch(
            "suprnews.scraper.fetcher.fetch_plain_html", return_value=fallback_result
        ) as fallback:
            outcome = fetch_article(_URL)

        fallback.assert_called_once_with(_URL)
        # Fallback output is returned as-is, without a second garble check.
        assert outcome.content == fallback_result.content
        assert outcome.method is ExtractionMethod.FALLBACK
        assert outcome.fell_back is True

    def test_garbled_primary_end_to_end(self) -> None:
        garbled = ExtractionResult(content="é " * 300, method=ExtractionMethod.PRIMARY)
        with respx.mock:
            route = respx.get(_URL).mock(return_value=_html_response())
            with patch("suprnews.scraper.fetcher.extract_primary", return_value=garbled):
                outcome = fetch_article(_URL)

        assert route.call_count == 2
        assert outcome.method is ExtractionMethod.FALLBACK
        assert outcome.content.startswith('<div class="article-content">')
        assert "transit plan" in outcome.content

    def test_parse_failure_triggers_fallback(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=_html_response())
            with patch(
                "suprnews.scraper.fetcher.extract_primary",
                side_effect=ParseFailure("nothing found", url=_URL),
            ):
                outcome = fetch_article(_URL)

        assert route.call_count == 2
        assert outcome.fell_back is True
        assert outcome.method is ExtractionMethod.FALLBACK
        fallback_request = route.calls[1].request
        assert fallback_request.headers["Accept-Language"] == "en-US,en;q=0.9"
        assert "Upgrade-Insecure-Requests" not in fallback_request.headers

    def test_fallback_network_failure_returns_sentinel(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(
                side_effect=[_html_response(), httpx.Response(500)]
            )
            with patch(
                "suprnews.scraper.fetcher.extract_primary",
                side_effect=ParseFailure("nothing found", url=_URL),
            ):
                outcome = fetch_article(_URL)

        assert outcome.content == UNAVAILABLE
        assert outcome.fell_back is True
        assert outcome.failure is FailureKind.NETWORK
