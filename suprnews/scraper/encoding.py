"""Character-encoding resolution for fetched documents.

The charset comes from the ``Content-Type`` header when present, then from a
``<meta>`` declaration near the top of the document, and finally defaults to
UTF-8.  Decoding is best-effort: an unknown label or a decode error leaves the
original bytes untouched.
"""

from __future__ import annotations

import codecs
import re
from typing import Optional

from loguru import logger

from suprnews.config import settings
from suprnews.errors import DecodeFailure

DEFAULT_ENCODING = "utf-8"

_HEADER_CHARSET = re.compile(r"charset\s*=\s*[\"']?([^\s;\"']+)", re.IGNORECASE)
_META_CHARSET = re.compile(
    r"<meta\s+[^>]*charset\s*=\s*['\"]?([^'\">\s]+)['\"]?", re.IGNORECASE
)
_META_HTTP_EQUIV = re.compile(
    r"<meta\s+[^>]*http-equiv\s*=\s*['\"]?content-type['\"]?[^>]*"
    r"content\s*=\s*['\"]?[^'\"]*charset\s*=\s*([^'\">\s;]+)['\"]?",
    re.IGNORECASE,
)

# Browsers decode these labels as windows-1252 (WHATWG Encoding Standard).
_HTML_ALIASES = {
    "iso-8859-1": "windows-1252",
    "iso8859-1": "windows-1252",
    "latin1": "windows-1252",
    "latin-1": "windows-1252",
    "l1": "windows-1252",
    "us-ascii": "windows-1252",
    "ascii": "windows-1252",
    "x-user-defined": "windows-1252",
}


def charset_from_header(content_type: Optional[str]) -> Optional[str]:
    """Return the lowercased ``charset`` parameter of *content_type*, if any."""
    if not content_type:
        return None
    match = _HEADER_CHARSET.search(content_type)
    if not match:
        return None
    charset = match.group(1).strip().lower()
    return charset or None


def charset_from_markup(body: bytes, scan_bytes: Optional[int] = None) -> Optional[str]:
    """Return the first ``<meta>`` charset declared in the head of *body*."""
    if not body:
        return None
    limit = scan_bytes if scan_bytes is not None else settings.meta_scan_bytes
    head = body[:limit].decode("ascii", errors="ignore")
    for pattern in (_META_CHARSET, _META_HTTP_EQUIV):
        match = pattern.search(head)
        if match:
            return match.group(1).strip().lower()
    return None


def resolve_encoding(body: bytes, content_type: Optional[str] = None) -> str:
    """Return the charset label for *body*; never empty.

    Priority: header ``charset=`` parameter, ``<meta>`` declaration, then
    ``"utf-8"``.
    """
    return (
        charset_from_header(content_type)
        or charset_from_markup(body)
        or DEFAULT_ENCODING
    )


def _transcode(body: bytes, encoding: str) -> bytes:
    codec_name = _HTML_ALIASES.get(encoding, encoding)
    try:
        codec = codecs.lookup(codec_name)
    except LookupError as exc:
        raise DecodeFailure(f"no decoder for {encoding!r}", encoding=encoding) from exc
    # hex, base64, rot13 and friends are bytes-to-bytes or str-to-str codecs
    if not getattr(codec, "_is_text_encoding", True):
        raise DecodeFailure(f"{encoding!r} is not a text encoding", encoding=encoding)
    try:
        return body.decode(codec.name).encode("utf-8")
    except (UnicodeError, LookupError) as exc:
        raise DecodeFailure(
            f"cannot decode {len(body)} bytes as {encoding!r}: {exc}",
            encoding=encoding,
        ) from exc


def decode_body(body: bytes, encoding: str) -> bytes:
    """Transcode *body* from *encoding* to UTF-8 bytes.

    UTF-8 input is returned as-is.  When no decoder exists for the label or
    the bytes do not decode, the failure is logged and the original bytes
    are returned.
    """
    if encoding.replace("_", "-") in ("utf-8", "utf8"):
        return body
    try:
        decoded = _transcode(body, encoding)
    except DecodeFailure as exc:
        logger.warning(f"{exc}; keeping {len(body)} raw bytes")
        return body
    logger.debug(f"Converted {len(body)} bytes from {encoding} to {len(decoded)} UTF-8 bytes")
    return decoded


def to_text(body: bytes) -> str:
    """Interpret UTF-8 *body* as text, substituting undecodable bytes."""
    return body.decode("utf-8", errors="replace")
