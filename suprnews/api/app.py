"""FastAPI application factory.

Lifespan
--------
On startup the app configures the loguru sink.  The core keeps no state
between requests, so there is nothing to tear down.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /content     article fetch / extraction / display substitution
    /categorize  feed-hint overrides + keyword categorizer
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from suprnews.logs import configure_logging

from suprnews.api.routers import categorize as categorize_router
from suprnews.api.routers import content as content_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    configure_logging()
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="SuprNews Content API",
        description=(
            "Article content extraction and topic categorization for the "
            "SuprNews feed reader. Fetches a page, resolves its encoding, "
            "extracts and cleans the article body, and labels items with one "
            "of a fixed set of topics."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(content_router.router, prefix="/content", tags=["content"])
    app.include_router(categorize_router.router, prefix="/categorize", tags=["categorize"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn suprnews.api.app:app --reload
app = create_app()
