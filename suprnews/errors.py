"""Failure taxonomy for the fetch/extract pipeline.

These exceptions are raised inside :mod:`suprnews.scraper` and absorbed by the
orchestrator, which turns them into a fallback attempt or the
``UNAVAILABLE`` sentinel.  Callers of
:func:`~suprnews.scraper.fetcher.fetch_article_content` never see them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    NETWORK = "network"
    DECODE = "decode"
    PARSE = "parse"
    REJECTED = "rejected"
    INTERNAL = "internal"


class FetchError(Exception):
    """Base class for every handled pipeline failure."""

    kind: FailureKind = FailureKind.NETWORK

    def __init__(self, message: str, *, url: str = "", **context: Any) -> None:
        super().__init__(message)
        self.url = url
        self.context = context

    def __str__(self) -> str:
        base = super().__str__()
        if self.url:
            return f"{base} ({self.url})"
        return base


class NetworkFailure(FetchError):
    """Timeout, connection error, redirect cap or non-2xx status."""

    kind = FailureKind.NETWORK

    @property
    def status_code(self) -> int | None:
        return self.context.get("status_code")


class DecodeFailure(FetchError):
    """Unrecognised or unsupported character encoding."""

    kind = FailureKind.DECODE


class ParseFailure(FetchError):
    """Markup could not be parsed or yielded no content."""

    kind = FailureKind.PARSE


class ContentRejected(FetchError):
    """Binary signature or garble ratio above threshold."""

    kind = FailureKind.REJECTED


class BinaryContent(ContentRejected):
    """Payload carries a binary signature or too many NUL/control bytes."""


class GarbledContent(ContentRejected):
    """Extracted text is still garbled after cleaning."""
