"""Content extraction: turns decoded page markup into an :class:`ExtractionResult`.

Two strategies, tried in order by the orchestrator:

* :func:`extract_primary`: readability density scoring over block nodes.
* :func:`extract_fallback`: strip boilerplate, then take the first
  substantial element matched by :data:`CONTENT_SELECTORS`.
"""

from __future__ import annotations

import html as html_lib
import re
from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger
from lxml.etree import ParserError
from readability import Document
from readability.readability import Unparseable

from suprnews.config import settings
from suprnews.errors import ParseFailure
from suprnews.scraper.models import ExtractionMethod, ExtractionResult

# Most specific container first; the order is significant.
CONTENT_SELECTORS = (
    "article",
    "main",
    ".article",
    ".content",
    ".post",
    "#content",
    "#main",
)

BOILERPLATE_TAGS = ("script", "style", "nav", "header", "footer", "iframe")

WRAPPER_CLASS = "article-content"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def extract_title(html: str) -> str:
    """Return the text content of the first ``<title>`` tag, or empty string."""
    match = re.search(r"<title[^>]*>([^<]+)</title>", html, re.IGNORECASE)
    if match:
        return html_lib.unescape(match.group(1)).strip()
    return ""


def _visible_text(markup: str) -> str:
    return BeautifulSoup(markup, "html.parser").get_text(" ", strip=True)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_primary(html: str, url: Optional[str] = None) -> ExtractionResult:
    """Pick the highest-scoring content node of *html* with readability.

    Raises:
        ParseFailure: If the markup cannot be parsed or the winning node
            carries no visible text.
    """
    if not html.strip():
        raise ParseFailure("empty document", url=url or "")
    try:
        doc = Document(html, url=url)
        content = doc.summary(html_partial=True)
        title = doc.short_title()
    except (Unparseable, ParserError, ValueError) as exc:
        raise ParseFailure(f"readability could not parse document: {exc}", url=url or "") from exc

    if not _visible_text(content):
        raise ParseFailure("readability found no content", url=url or "")

    logger.debug(f"Readability title: {title!r}, content length: {len(content)}")
    return ExtractionResult(
        content=content,
        method=ExtractionMethod.PRIMARY,
        title=title or extract_title(html),
    )


def extract_fallback(html: str, min_length: Optional[int] = None) -> ExtractionResult:
    """Extract the main content container of *html* using fixed selectors.

    Non-content elements are removed first.  The first selector whose inner
    markup is longer than *min_length* characters wins; otherwise the whole
    body is used.  The result is wrapped in ``<div class="article-content">``.
    """
    threshold = settings.min_selector_length if min_length is None else min_length
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(list(BOILERPLATE_TAGS)):
        tag.decompose()

    main_content = ""
    for selector in CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        inner = element.decode_contents()
        if len(inner) > threshold:
            logger.debug(f"Fallback matched selector {selector!r} ({len(inner)} chars)")
            main_content = inner
            break

    if not main_content:
        body = soup.body
        main_content = body.decode_contents() if body is not None else soup.decode()

    return ExtractionResult(
        content=f'<div class="{WRAPPER_CLASS}">{main_content}</div>',
        method=ExtractionMethod.FALLBACK,
        title=extract_title(html),
    )
