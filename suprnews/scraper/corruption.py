"""Heuristics that flag binary payloads and visibly garbled text.

Both checks return booleans and never raise.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from suprnews.config import settings

SAMPLE_SIZE = 1000
SEQUENCE_WINDOW = 100

BINARY_SIGNATURES = (
    b"%PDF",            # PDF
    b"PK\x03\x04",      # ZIP, DOCX, XLSX
    b"GIF8",            # GIF
    b"\x89PNG",         # PNG
    b"\xff\xd8\xff",    # JPEG
)

NUL_RATIO = 0.05
CONTROL_RATIO = 0.10

# Tell-tale byte soup left behind by decoding with the wrong charset.
MISDECODE_SEQUENCES = ("#õ", "\ufffd", "\x00", "‡˜'ž")

_COMBINING_MARKS = range(0x300, 0x370)
_ALLOWED_CONTROLS = frozenset("\n\r\t")


def has_binary_signature(data: bytes) -> bool:
    """Return ``True`` if *data* starts with a known binary file header."""
    return data.startswith(BINARY_SIGNATURES)


def is_binary_content(data: bytes) -> bool:
    """Return ``True`` if *data* looks like a binary file rather than markup."""
    if has_binary_signature(data):
        return True
    sample = data[:SAMPLE_SIZE]
    if not sample:
        return False
    nul_count = sample.count(0)
    control_count = sum(1 for b in sample if b < 9 or 13 < b < 32)
    size = len(sample)
    return nul_count / size > NUL_RATIO or control_count / size > CONTROL_RATIO


def _is_unusual(char: str) -> bool:
    code = ord(char)
    if 32 <= code <= 126 or char in _ALLOWED_CONTROLS:
        return False
    return code not in _COMBINING_MARKS


def garble_ratio(text: str) -> float:
    """Share of unusual characters in the first :data:`SAMPLE_SIZE` chars."""
    sample = text[:SAMPLE_SIZE]
    if not sample:
        return 0.0
    return sum(1 for c in sample if _is_unusual(c)) / len(sample)


def is_garbled(text: str, threshold: Optional[float] = None) -> bool:
    """Return ``True`` if *text* looks like the product of a decoding failure.

    Garbled when the unusual-character share of the sample strictly exceeds
    *threshold* (``settings.garble_threshold`` by default), or when a known
    mis-decoding sequence shows up near the start of the text.
    """
    if not text:
        return False
    limit = settings.garble_threshold if threshold is None else threshold
    ratio = garble_ratio(text)
    if ratio > limit:
        logger.warning(f"Content appears garbled: {ratio:.0%} unusual characters")
        return True
    head = text[:SEQUENCE_WINDOW]
    return any(seq in head for seq in MISDECODE_SEQUENCES)


def count_special_bytes(data: bytes) -> int:
    """Count bytes outside printable ASCII, for diagnostics."""
    return sum(1 for b in data if b < 32 or b > 126)
