"""Article content endpoints.

Routes
------
GET  /content?url=<article url>      Fetch, extract and clean article markup
POST /content/display                Pick fresh content or the stored summary
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, HttpUrl

from suprnews.display import resolve_display_content, safe_content
from suprnews.scraper.fetcher import fetch_article

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ContentResponse(BaseModel):
    url: str
    content: str
    available: bool
    method: Optional[str]
    fell_back: bool


class DisplayRequest(BaseModel):
    url: HttpUrl
    stored_summary: str = ""


class DisplayResponse(BaseModel):
    url: str
    content: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=ContentResponse)
def get_content(url: HttpUrl) -> dict[str, Any]:
    """Fetch *url* and return display-ready article markup.

    A page that cannot be extracted is not an error: the response carries
    the ``"No content available"`` sentinel with ``available=false``.
    """
    url_str = str(url)
    outcome = fetch_article(url_str)
    return {
        "url": url_str,
        "content": safe_content(outcome.content, url_str),
        "available": outcome.available,
        "method": outcome.method.value if outcome.method else None,
        "fell_back": outcome.fell_back,
    }


@router.post("/display", response_model=DisplayResponse)
def display_content(body: DisplayRequest) -> dict[str, Any]:
    """Return fresh content for the article, or its stored summary as fallback."""
    url_str = str(body.url)
    return {
        "url": url_str,
        "content": resolve_display_content(url_str, body.stored_summary),
    }
