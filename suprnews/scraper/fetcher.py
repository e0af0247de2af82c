"""Article fetch orchestration: HTTP → encoding → extraction → cleaning.

``fetch_article`` is a two-state machine.  It starts in
:attr:`ExtractionMethod.PRIMARY` (readability) and moves to
:attr:`ExtractionMethod.FALLBACK` (selector extraction over a second, simpler
request) only when the primary extraction fails or its cleaned output is
still garbled.  Failures before extraction (network errors, non-2xx
statuses and binary payloads) are terminal.

Every failure is logged and converted to the :data:`UNAVAILABLE` sentinel;
nothing propagates to callers of :func:`fetch_article` or
:func:`fetch_article_content`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

import httpx
from loguru import logger

from suprnews.config import settings
from suprnews.errors import (
    BinaryContent,
    FailureKind,
    FetchError,
    GarbledContent,
    NetworkFailure,
    ParseFailure,
)
from suprnews.scraper.cleaner import clean_content
from suprnews.scraper.corruption import count_special_bytes, is_binary_content, is_garbled
from suprnews.scraper.encoding import decode_body, resolve_encoding, to_text
from suprnews.scraper.extractor import extract_fallback, extract_primary
from suprnews.scraper.models import (
    UNAVAILABLE,
    ExtractionMethod,
    ExtractionResult,
    FetchOutcome,
    RawDocument,
)

SIMPLE_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml",
    "Accept-Language": "en-US,en;q=0.9",
}


def browser_headers() -> Dict[str, str]:
    """Full browser-like header set used for the primary request."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
        "Cache-Control": "max-age=0",
    }


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def fetch_raw(
    url: str,
    *,
    headers: Dict[str, str],
    timeout: float,
    max_redirects: Optional[int] = None,
) -> RawDocument:
    """GET *url* and return the undecoded body.

    Redirects are followed; *max_redirects* caps them (httpx's default cap
    applies when it is ``None``).

    Raises:
        NetworkFailure: On an invalid URL, transport error, timeout, too many
            redirects or a non-2xx response.
    """
    client_kwargs: Dict[str, object] = {
        "headers": headers,
        "timeout": timeout,
        "follow_redirects": True,
    }
    if max_redirects is not None:
        client_kwargs["max_redirects"] = max_redirects

    try:
        with httpx.Client(**client_kwargs) as client:  # type: ignore[arg-type]
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkFailure(f"request failed: {exc!r}", url=url) from exc

    if not response.is_success:
        raise NetworkFailure(
            f"request failed with status code {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    return RawDocument(
        url=url,
        body=response.content,
        content_type=response.headers.get("Content-Type", ""),
        status_code=response.status_code,
    )


def _decode(raw: RawDocument) -> bytes:
    encoding = resolve_encoding(raw.body, raw.content_type)
    logger.debug(
        f"Content-Type {raw.content_type!r}, detected encoding {encoding!r} for {raw.url}"
    )
    return decode_body(raw.body, encoding)


# ---------------------------------------------------------------------------
# Extraction paths
# ---------------------------------------------------------------------------

def fetch_with_readability(url: str) -> ExtractionResult:
    """Primary path: browser headers, readability extraction, garble check.

    Raises:
        NetworkFailure: The request did not produce a 2xx response.
        BinaryContent: The raw or decoded body looks binary.
        ParseFailure: Readability could not find content.
        GarbledContent: The cleaned content is still garbled.
    """
    raw = fetch_raw(
        url,
        headers=browser_headers(),
        timeout=settings.request_timeout,
        max_redirects=settings.max_redirects,
    )
    logger.debug(f"Raw body length: {len(raw.body)} bytes")
    if is_binary_content(raw.body):
        raise BinaryContent("raw body is binary", url=url, size=len(raw.body))

    decoded = _decode(raw)
    logger.debug(
        f"Decoded body length: {len(decoded)} bytes, "
        f"{count_special_bytes(decoded)} special bytes"
    )
    if is_binary_content(decoded):
        raise BinaryContent("decoded body is binary", url=url, size=len(decoded))

    result = extract_primary(to_text(decoded), url=url)
    content = clean_content(result.content)
    if is_garbled(content):
        raise GarbledContent("content still garbled after cleaning", url=url, chars=len(content))
    return replace(result, content=content)


def fetch_plain_html(url: str) -> ExtractionResult:
    """Fallback path: simple headers, shorter timeout, selector extraction.

    The cleaned output is returned without a garble check.

    Raises:
        NetworkFailure: The request did not produce a 2xx response.
    """
    raw = fetch_raw(url, headers=SIMPLE_HEADERS, timeout=settings.fallback_timeout)
    result = extract_fallback(to_text(_decode(raw)))
    return replace(result, content=clean_content(result.content))


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def _falls_back(exc: FetchError) -> bool:
    return isinstance(exc, (ParseFailure, GarbledContent))


def fetch_article(url: str) -> FetchOutcome:
    """Run the primary → fallback state machine for *url*.

    The returned :class:`FetchOutcome` records which method produced the
    content and whether the fallback stage was entered.  Never raises: an
    unexpected error ends the run with the sentinel and
    :attr:`FailureKind.INTERNAL`.
    """
    logger.info(f"Fetching article content from {url}")
    stage = ExtractionMethod.PRIMARY
    fell_back = False
    while True:
        try:
            if stage is ExtractionMethod.PRIMARY:
                result = fetch_with_readability(url)
            else:
                result = fetch_plain_html(url)
        except FetchError as exc:
            logger.warning(f"[{exc.kind.value}] {stage.value} extraction failed: {exc}")
            if stage is ExtractionMethod.PRIMARY and _falls_back(exc):
                stage = ExtractionMethod.FALLBACK
                fell_back = True
                continue
            return FetchOutcome(url=url, content=UNAVAILABLE, fell_back=fell_back, failure=exc.kind)
        except Exception:
            logger.exception(f"Unexpected error during {stage.value} extraction of {url}")
            return FetchOutcome(
                url=url,
                content=UNAVAILABLE,
                fell_back=fell_back,
                failure=FailureKind.INTERNAL,
            )

        logger.info(f"Extracted {len(result.content)} chars from {url} via {result.method.value}")
        return FetchOutcome(
            url=url,
            content=result.content,
            method=result.method,
            fell_back=fell_back,
        )


def fetch_article_content(url: str) -> str:
    """Return display-ready article markup for *url*, or :data:`UNAVAILABLE`.

    Never raises.
    """
    return fetch_article(url).content
