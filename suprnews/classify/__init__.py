"""Topic classification package: keyword vectors, categorizer, feed overrides."""

from suprnews.classify.categorizer import best_category, categorize, score_text, tag_tokens
from suprnews.classify.overrides import (
    CategoryAssignment,
    FeedItem,
    assign_category,
    categorize_item,
)
from suprnews.classify.vectors import CATEGORIES, CATEGORY_PRIORITY, CATEGORY_VECTORS, OTHER

__all__ = [
    "categorize",
    "best_category",
    "score_text",
    "tag_tokens",
    "FeedItem",
    "CategoryAssignment",
    "assign_category",
    "categorize_item",
    "CATEGORIES",
    "CATEGORY_PRIORITY",
    "CATEGORY_VECTORS",
    "OTHER",
]
