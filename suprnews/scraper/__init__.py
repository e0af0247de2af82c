"""Scraper package: article fetch, decoding, extraction & cleaning."""

from suprnews.scraper.cleaner import clean_content
from suprnews.scraper.corruption import is_binary_content, is_garbled
from suprnews.scraper.encoding import decode_body, resolve_encoding
from suprnews.scraper.extractor import extract_fallback, extract_primary
from suprnews.scraper.fetcher import fetch_article, fetch_article_content
from suprnews.scraper.models import (
    UNAVAILABLE,
    ExtractionMethod,
    ExtractionResult,
    FetchOutcome,
    RawDocument,
)

__all__ = [
    "fetch_article",
    "fetch_article_content",
    "resolve_encoding",
    "decode_body",
    "is_binary_content",
    "is_garbled",
    "extract_primary",
    "extract_fallback",
    "clean_content",
    "UNAVAILABLE",
    "ExtractionMethod",
    "ExtractionResult",
    "FetchOutcome",
    "RawDocument",
]
