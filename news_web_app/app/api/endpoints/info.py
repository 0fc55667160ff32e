"""
Informational endpoints: application name, greeting and statistics.

``GET /stats`` only reads the request counter; ``GET /welcome`` takes a
new request id.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from news_web_app.app.api.deps import get_news_service
from news_web_app.app.schemas.article import StatsResponse, WelcomeResponse
from news_web_app.app.services.news_service import NewsService

router = APIRouter()


@router.get("/name", response_class=HTMLResponse)
async def app_name(service: NewsService = Depends(get_news_service)) -> str:
    """Return the application name as an HTML heading."""
    return service.app_name_html()


@router.get("/welcome", response_model=WelcomeResponse)
async def welcome(
    name: Optional[str] = Query(None, description="Name to greet; defaults to Guest"),
    category: Optional[str] = Query(None, description="Preferred news category; defaults to general"),
    service: NewsService = Depends(get_news_service),
) -> WelcomeResponse:
    # Empty values fall back to the defaults like missing ones.
    return service.welcome(name=name or "Guest", category=category or "general")


@router.get("/stats", response_model=StatsResponse)
async def stats(service: NewsService = Depends(get_news_service)) -> StatsResponse:
    """Return the request count and server time."""
    return service.stats()
