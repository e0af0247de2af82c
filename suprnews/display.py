"""Display-side handling of fetched or stored article content.

The sentinel and garbled content are normal outcomes here: they are replaced
by a user-facing message pointing at the original article rather than shown.
"""

from __future__ import annotations

import html
from typing import Callable, Optional

from loguru import logger

from suprnews.scraper.corruption import is_garbled
from suprnews.scraper.fetcher import fetch_article_content
from suprnews.scraper.models import UNAVAILABLE

MIN_CHECK_LENGTH = 20


def undisplayable_message(url: str = "") -> str:
    """Markup shown in place of content that could not be rendered."""
    return (
        "<div class='error-message'>"
        "<p>Sorry, we couldn't properly display this article.</p>"
        "<p>The article might be behind a paywall or requires JavaScript.</p>"
        f"<p><a href='{html.escape(url, quote=True)}' class='text-blue-500'>"
        "Try viewing the original article</a></p>"
        "</div>"
    )


def original_link_message(url: str) -> str:
    return (
        "<p>Content couldn't be properly displayed. "
        f"<a href='{html.escape(url, quote=True)}' target='_blank' class='text-blue-500'>"
        "View the original article</a>.</p>"
    )


def safe_content(content: str, url: str = "") -> str:
    """Strip replacement characters; swap garbled content for an error block."""
    if "\ufffd" in content:
        logger.warning("Content contains replacement characters")
        content = content.replace("\ufffd", "")
    if len(content) > MIN_CHECK_LENGTH and is_garbled(content):
        logger.error("Content appears garbled, replacing with error message")
        return undisplayable_message(url)
    return content


def resolve_display_content(
    url: str,
    stored_summary: str,
    fetcher: Optional[Callable[[str], str]] = None,
) -> str:
    """Pick what to show for an article: fresh content, stored summary, or a link.

    Fresh content wins when it is neither the sentinel nor garbled.  Otherwise
    the stored summary is kept, unless it is garbled too, in which case a
    "view the original article" paragraph is returned.
    """
    content = (fetcher or fetch_article_content)(url)
    if content != UNAVAILABLE and not is_garbled(content):
        return content
    if is_garbled(stored_summary):
        logger.warning(f"Both fetched content and stored summary are garbled for {url}")
        return original_link_message(url)
    return stored_summary
