"""Weighted-keyword topic categorizer over POS-tagged nouns.

Text is tokenized and tagged with NLTK's perceptron tagger (Penn Treebank
tags).  Only nouns (``NN``, ``NNS``, ``NNP``, ``NNPS``) are scored: each
lowercased noun found in a category's keyword table adds that keyword's
weight to the category.  The strictly highest score wins; ties go to the
category listed first in :data:`CATEGORY_PRIORITY`; no score means
``"other"``.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

import nltk
from loguru import logger

from suprnews.classify.vectors import CATEGORY_PRIORITY, CATEGORY_VECTORS, OTHER
from suprnews.config import settings

TaggedTokens = List[Tuple[str, str]]
Tagger = Callable[[str], TaggedTokens]

NOUN_TAGS = frozenset({"NN", "NNS", "NNP", "NNPS"})

_TAGGER_RESOURCE = "averaged_perceptron_tagger_eng"

# Only success is remembered; a failed lookup or download is retried next call.
_tagger_ready = False


def ensure_tagger() -> bool:
    """Make sure the NLTK tagger model is available, downloading it if allowed."""
    global _tagger_ready
    if _tagger_ready:
        return True
    download_dir = str(settings.nltk_data_dir) if settings.nltk_data_dir else None
    if download_dir and download_dir not in nltk.data.path:
        nltk.data.path.insert(0, download_dir)
    try:
        nltk.data.find(f"taggers/{_TAGGER_RESOURCE}")
        _tagger_ready = True
        return True
    except LookupError:
        if not settings.nltk_auto_download:
            logger.warning(f"NLTK resource {_TAGGER_RESOURCE!r} missing and auto-download disabled")
            return False

    logger.info(f"Downloading NLTK resource {_TAGGER_RESOURCE!r}")
    try:
        nltk.download(_TAGGER_RESOURCE, download_dir=download_dir, quiet=True, raise_on_error=False)
    except OSError as exc:
        logger.error(f"NLTK download failed: {exc}")
        return False
    try:
        nltk.data.find(f"taggers/{_TAGGER_RESOURCE}")
    except LookupError:
        logger.error(f"NLTK resource {_TAGGER_RESOURCE!r} could not be loaded")
        return False
    _tagger_ready = True
    return True


def tag_tokens(text: str) -> TaggedTokens:
    """Tokenize *text* and return ``(token, penn_tag)`` pairs.

    Returns an empty list when the tagger model cannot be loaded.
    """
    tokens = nltk.wordpunct_tokenize(text)
    if not tokens or not ensure_tagger():
        return []
    try:
        return nltk.pos_tag(tokens)
    except LookupError as exc:
        logger.error(f"Error tagging text: {exc}")
        return []


def score_text(text: str, tagger: Optional[Tagger] = None) -> Dict[str, float]:
    """Accumulate keyword weights per category over the nouns of *text*.

    Only categories with at least one hit appear in the result.
    """
    scores: Dict[str, float] = {}
    if not text or not text.strip():
        return scores
    for token, tag in (tagger or tag_tokens)(text):
        if tag not in NOUN_TAGS:
            continue
        word = token.lower()
        for category in CATEGORY_PRIORITY:
            weight = CATEGORY_VECTORS[category].get(word)
            if weight is not None:
                scores[category] = scores.get(category, 0.0) + weight
    return scores


def best_category(scores: Dict[str, float]) -> str:
    """Return the strictly highest-scoring category, or ``"other"``."""
    top_category = OTHER
    top_score = 0.0
    for category in CATEGORY_PRIORITY:
        score = scores.get(category, 0.0)
        if score > top_score:
            top_score = score
            top_category = category

    logger.debug(f"Categorization scores: {scores}")
    logger.debug(f"Top category: {top_category} (score: {top_score:.2f})")
    return top_category


def categorize(text: str, tagger: Optional[Tagger] = None) -> str:
    """Return the best-matching category label for *text*, or ``"other"``."""
    return best_category(score_text(text, tagger))
