"""
Business logic for the news endpoints.

``NewsService`` answers every operation of the API.  Each method is a
total function over in‑memory data: input validation has already been
done by the schemas at the HTTP boundary, so nothing here raises.

Every method except ``app_name_html`` and ``stats`` takes a fresh id
from the request counter.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from news_web_app.app.schemas.article import (
    Article,
    AuthorSearchResponse,
    NewsListResponse,
    StatsResponse,
    SubmissionResponse,
    WelcomeResponse,
)
from news_web_app.app.services.article_provider import ArticleProvider
from news_web_app.app.services.request_counter import RequestCounter

logger = logging.getLogger(__name__)

WELCOME_TEMPLATE = "Welcome to {app_name}, {name}! Your request was processed at {time}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class NewsService:
    """Article listing, search, greeting and statistics."""

    def __init__(
        self,
        provider: ArticleProvider,
        counter: RequestCounter,
        *,
        app_name: str = "News Web App",
        default_limit: int = 10,
    ) -> None:
        self.provider = provider
        self.counter = counter
        self.app_name = app_name
        self.default_limit = default_limit

    def app_name_html(self) -> str:
        return f"<h3>{self.app_name}</h3>"

    def list_articles(self, author: Optional[str] = None, limit: Optional[int] = None) -> NewsListResponse:
        """Return articles, optionally filtered by author and truncated.

        ``author`` is matched as a case‑insensitive substring.  The list is
        cut to the first ``limit`` entries only when ``0 < limit < total``;
        a zero or negative limit leaves it untouched.
        """
        if limit is None:
            limit = self.default_limit
        articles: List[Article] = list(self.provider.list_articles())
        if author:
            needle = author.lower()
            articles = [article for article in articles if needle in article.author.lower()]
        # limit <= 0 falls through without truncating.
        if 0 < limit < len(articles):
            articles = articles[:limit]
        logger.debug("Listing %d articles (author=%r, limit=%d)", len(articles), author, limit)
        return NewsListResponse(
            status="ok",
            total=len(articles),
            request_id=self.counter.increment(),
            timestamp=_now(),
            articles=articles,
        )

    def welcome(self, name: str = "Guest", category: str = "general") -> WelcomeResponse:
        now = _now()
        message = WELCOME_TEMPLATE.format(
            app_name=self.app_name,
            name=name,
            time=now.strftime("%a %b %d %H:%M:%S %Z %Y"),
        )
        return WelcomeResponse(
            message=message,
            category=category,
            request_id=self.counter.increment(),
            timestamp=now,
            status="ok",
        )

    def stats(self) -> StatsResponse:
        return StatsResponse(
            total_requests=self.counter.value,
            server_time=_now(),
            status="running",
            application_name=self.app_name,
        )

    def find_by_author(self, name: str) -> AuthorSearchResponse:
        """Return articles whose author equals ``name``, ignoring case."""
        wanted = name.lower()
        matches = [
            article for article in self.provider.list_articles() if article.author.lower() == wanted
        ]
        logger.debug("Author search %r matched %d articles", name, len(matches))
        return AuthorSearchResponse(
            status="ok" if matches else "no_results",
            searched_author=name,
            total=len(matches),
            request_id=self.counter.increment(),
            timestamp=_now(),
            articles=matches,
        )

    def submit_article(self, article: Article) -> SubmissionResponse:
        """Acknowledge a submitted article.  It is not stored."""
        logger.info("Received article %r by %r", article.title, article.author)
        return SubmissionResponse(
            status="received",
            received_article=article,
            request_id=self.counter.increment(),
            timestamp=_now(),
        )
