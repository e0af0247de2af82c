"""Categorization endpoint.

Routes
------
POST /categorize    Body: {"title", "description", "categories", "feed_name"}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from suprnews.classify import FeedItem, assign_category

router = APIRouter()


class CategorizeRequest(BaseModel):
    title: str = ""
    description: str = ""
    categories: list[str] = Field(default_factory=list)
    feed_name: str = ""


class CategorizeResponse(BaseModel):
    category: str
    source: str
    scores: dict[str, float]


@router.post("", response_model=CategorizeResponse)
def categorize_item_endpoint(body: CategorizeRequest) -> dict[str, Any]:
    """Assign a topic category from feed hints, falling back to keyword scoring.

    ``scores`` is only populated when the keyword categorizer made the call.
    """
    item = FeedItem(
        title=body.title,
        description=body.description,
        categories=tuple(body.categories),
        feed_name=body.feed_name,
    )
    assignment = assign_category(item)
    return {
        "category": assignment.category,
        "source": assignment.source,
        "scores": assignment.scores,
    }
