"""Feed-supplied category hints that take precedence over the NLP categorizer.

Each rule table is an ordered tuple of ``(predicate, category)`` pairs; the
first predicate that accepts the lowercased hint text decides the category.
Feed item tags are consulted when the item has any, the feed's display name
otherwise.  Only when no rule matches does the item go through
the keyword categorizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

from loguru import logger

from suprnews.classify.categorizer import Tagger, best_category, score_text

Predicate = Callable[[str], bool]
Rule = Tuple[Predicate, str]

SOURCE_FEED_TAGS = "feed_tags"
SOURCE_FEED_NAME = "feed_name"
SOURCE_NLP = "nlp"


def contains_any(*needles: str) -> Predicate:
    """Predicate that is true when the text contains any of *needles*."""

    def predicate(text: str) -> bool:
        return any(needle in text for needle in needles)

    return predicate


FEED_TAG_RULES: Tuple[Rule, ...] = (
    (contains_any("tech"), "technology"),
    (contains_any("polit"), "politics"),
    (contains_any("sport"), "sports"),
    (contains_any("business", "econ"), "business"),
    (contains_any("entertain"), "entertainment"),
    (contains_any("health"), "health"),
    (contains_any("science"), "science"),
)

FEED_NAME_RULES: Tuple[Rule, ...] = (
    (contains_any("tech", "digital"), "technology"),
    (contains_any("polit"), "politics"),
    (contains_any("sport"), "sports"),
    (contains_any("business", "econ"), "business"),
    (contains_any("entertain", "hollywood"), "entertainment"),
    (contains_any("health"), "health"),
    (contains_any("science"), "science"),
)


@dataclass(frozen=True)
class FeedItem:
    """The slice of a parsed feed entry the categorizer needs."""

    title: str = ""
    description: str = ""
    link: str = ""
    categories: Tuple[str, ...] = ()
    feed_name: str = ""


@dataclass(frozen=True)
class CategoryAssignment:
    category: str
    source: str
    scores: Dict[str, float] = field(default_factory=dict)


def match_rules(text: str, rules: Sequence[Rule]) -> Optional[str]:
    """Return the category of the first rule accepting ``text.lower()``."""
    lowered = text.lower()
    for predicate, category in rules:
        if predicate(lowered):
            return category
    return None


def assign_category(item: FeedItem, tagger: Optional[Tagger] = None) -> CategoryAssignment:
    """Decide the category of *item* and where the decision came from."""
    if item.categories:
        category = match_rules(" ".join(item.categories), FEED_TAG_RULES)
        source = SOURCE_FEED_TAGS
    else:
        category = match_rules(item.feed_name, FEED_NAME_RULES)
        source = SOURCE_FEED_NAME

    scores: Dict[str, float] = {}
    if category is None:
        scores = score_text(f"{item.title} {item.description}", tagger)
        category = best_category(scores)
        source = SOURCE_NLP

    logger.info(f"Categorized article {item.title!r} as {category!r} ({source})")
    return CategoryAssignment(category=category, source=source, scores=scores)


def categorize_item(item: FeedItem, tagger: Optional[Tagger] = None) -> str:
    """Return the category label for *item*."""
    return assign_category(item, tagger).category
