"""Scrub extracted article markup of encoding debris.

:func:`clean_content` runs a fixed, order-sensitive series of passes and
repeats the series until the output stops changing, so that cleaning an
already-clean string is a no-op.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from loguru import logger

from suprnews.config import settings

# Windows-1252 punctuation that was decoded as Latin-1 C1 controls.
_LEGACY_PUNCTUATION = str.maketrans({
    "\u0093": "\u201c",
    "\u0094": "\u201d",
    "\u0096": "\u2013",
    "\u0097": "\u2014",
})

_CONTROL_CHARS = re.compile(r"[\x00-\x09\x0B\x0C\x0E-\x1F\x7F-\x9F]")
_MISDECODE_ARTIFACT = re.compile(r"#õ[0-9A-Za-z]{3,6}")
_DATA_URI = re.compile(r"data:[^;]+;base64,[a-zA-Z0-9+/=]{50,}")

_YOUTUBE_URL = (
    r"(?:https?://)?(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)"
    r"(?P<vid>[a-zA-Z0-9_-]{11})"
)
_YOUTUBE_URL_RE = re.compile(_YOUTUBE_URL, re.IGNORECASE)
# Whole anchors and other tags are consumed first so that URLs inside
# attributes are never rewritten.  An anchor body may not contain another
# `<a`, so an unclosed anchor stops scanning at the next one.
_YOUTUBE_SCAN = re.compile(
    r"(?P<anchor><a\b[^>]*>(?:(?!<a\b).)*?</a>)|(?P<tag><[^>]*>)|(?P<url>" + _YOUTUBE_URL + r")",
    re.IGNORECASE | re.DOTALL,
)
_ANCHOR_PARTS = re.compile(r"(<a\b[^>]*>)(.*)</a>\Z", re.IGNORECASE | re.DOTALL)
_HREF = re.compile(r"""href\s*=\s*["']([^"']*)["']""", re.IGNORECASE)

YOUTUBE_LINK_CLASS = "youtube-link"


@lru_cache(maxsize=8)
def _non_ascii_run(length: int) -> re.Pattern[str]:
    return re.compile(r"[^\x00-\x7F]{%d,}" % max(1, length))


def _youtube_anchor(url: str, video_id: str, inner: str) -> str:
    return (
        f'<a href="{url}" class="{YOUTUBE_LINK_CLASS}" '
        f'data-video-id="{video_id}">{inner}</a>'
    )


def _rewrite_youtube(match: re.Match[str]) -> str:
    if match.group("url"):
        url = match.group("url")
        return _youtube_anchor(url, match.group("vid"), url)

    anchor = match.group("anchor")
    if anchor is None or YOUTUBE_LINK_CLASS in anchor:
        return match.group(0)
    parts = _ANCHOR_PARTS.match(anchor)
    href = _HREF.search(parts.group(1)) if parts else None
    video = _YOUTUBE_URL_RE.search(href.group(1)) if href else None
    if video is None:
        return anchor
    return _youtube_anchor(href.group(1), video.group("vid"), parts.group(2))


def annotate_youtube_links(content: str) -> str:
    """Turn YouTube watch links into ``youtube-link`` anchors with the video id."""
    return _YOUTUBE_SCAN.sub(_rewrite_youtube, content)


def _clean_pass(content: str, run_length: int) -> str:
    content = content.replace("\x00", "").replace("\ufffd", "")
    content = content.translate(_LEGACY_PUNCTUATION)
    content = _CONTROL_CHARS.sub("", content)
    content = _MISDECODE_ARTIFACT.sub("", content)
    content = _non_ascii_run(run_length).sub(" ", content)
    content = _DATA_URI.sub("", content)
    return annotate_youtube_links(content)


def clean_content(content: str, run_length: Optional[int] = None) -> str:
    """Return *content* without NULs, replacement/control characters,
    long non-ASCII runs and inline base64 blobs, with YouTube links annotated.

    *run_length* is the shortest run of consecutive non-ASCII characters that
    gets collapsed to a single space (``settings.non_ascii_run_length`` by
    default).
    """
    length = settings.non_ascii_run_length if run_length is None else run_length
    logger.debug(
        f"Cleaning {len(content)} chars: {content.count(chr(0))} null, "
        f"{content.count(chr(0xFFFD))} replacement"
    )
    # Every pass but the last removes characters or wraps a bare YouTube URL,
    # and wrapped URLs are left alone by later passes.
    while True:
        cleaned = _clean_pass(content, length)
        if cleaned == content:
            break
        content = cleaned
    logger.debug(f"Content length after cleaning: {len(content)}")
    return content
