"""
News endpoints.

* ``GET /news``: list articles, optionally filtered by an author
  substring and truncated to ``limit`` entries.
* ``GET /news/author``: exact (case‑insensitive) author search; ``name``
  is required.
* ``POST /news``: accept an article.  The article is echoed back but not
  stored, so it never shows up in later listings.

Missing or mistyped parameters and malformed bodies are rejected with
HTTP 400 before the service is called (see ``core/errors.py``).
"""

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BeforeValidator

from news_web_app.app.api.deps import get_news_service
from news_web_app.app.schemas.article import (
    Article,
    AuthorSearchResponse,
    NewsListResponse,
    SubmissionResponse,
)
from news_web_app.app.services.news_service import NewsService

router = APIRouter()


def _blank_to_none(value: Any) -> Any:
    """Treat an empty query value (``?limit=``) as if it were missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


@router.get("/news", response_model=NewsListResponse)
async def list_news(
    author: Optional[str] = Query(None, description="Case-insensitive substring of the author name"),
    limit: Annotated[
        Optional[int],
        BeforeValidator(_blank_to_none),
        Query(description="Maximum number of articles; defaults to 10, values <= 0 disable the limit"),
    ] = None,
    service: NewsService = Depends(get_news_service),
) -> NewsListResponse:
    return service.list_articles(author=author, limit=limit)


@router.get("/news/author", response_model=AuthorSearchResponse)
async def news_by_author(
    name: str = Query(..., description="Exact author name, case-insensitive"),
    service: NewsService = Depends(get_news_service),
) -> AuthorSearchResponse:
    return service.find_by_author(name)


@router.post("/news", response_model=SubmissionResponse)
async def submit_news(
    article: Article,
    service: NewsService = Depends(get_news_service),
) -> SubmissionResponse:
    """Acknowledge a submitted article without storing it."""
    return service.submit_article(article)
