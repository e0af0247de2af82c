"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from suprnews.errors import FailureKind

UNAVAILABLE = "No content available"


class ExtractionMethod(str, Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RawDocument:
    """The raw HTTP response body for a single URL fetch."""

    url: str
    body: bytes
    content_type: str
    status_code: int


@dataclass(frozen=True)
class ExtractionResult:
    """Article markup produced by one of the extraction strategies."""

    content: str
    method: ExtractionMethod
    title: str = ""


@dataclass(frozen=True)
class FetchOutcome:
    """What :func:`~suprnews.scraper.fetcher.fetch_article` settled on.

    ``method`` is ``None`` when no extraction produced the content (the
    sentinel was returned).  ``fell_back`` is ``True`` whenever the fallback
    stage ran, whatever it returned.
    """

    url: str
    content: str
    method: Optional[ExtractionMethod] = None
    fell_back: bool = False
    failure: Optional[FailureKind] = None

    @property
    def available(self) -> bool:
        return self.content != UNAVAILABLE
