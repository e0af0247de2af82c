"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from suprnews.api import app

    uvicorn suprnews.api:app --reload
"""

from suprnews.api.app import app

__all__ = ["app"]
