"""Request dependencies shared by the endpoint modules."""

from fastapi import Request

from news_web_app.app.services.news_service import NewsService


def get_news_service(request: Request) -> NewsService:
    """Return the ``NewsService`` created by ``create_app`` for this app."""
    return request.app.state.news_service
