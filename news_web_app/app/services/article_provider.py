"""
Read‑only sources of articles.

``ArticleProvider`` is the seam between the news logic and wherever the
articles live.  The only implementation today, ``SeedArticleProvider``,
serves the fixed list of seven sample articles held in memory.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from news_web_app.app.schemas.article import Article


SEED_ARTICLES: Tuple[Article, ...] = (
    Article(
        author="John Smith",
        title="Tech Stocks Rise as Market Shows Optimism",
        description="Technology stocks experienced significant gains today as investors show renewed confidence in the sector.",
    ),
    Article(
        author="Sarah Johnson",
        title="Global Economic Outlook Improves",
        description="Economists predict stronger growth for the coming quarter based on recent economic indicators.",
    ),
    Article(
        author="Mike Davis",
        title="Renewable Energy Investments Surge",
        description="Clean energy projects receive record funding as companies shift towards sustainable practices.",
    ),
    Article(
        author="Emily Chen",
        title="Cryptocurrency Market Stabilizes",
        description="Digital currencies show signs of stability after weeks of volatility in the market.",
    ),
    Article(
        author="Robert Wilson",
        title="Healthcare Innovation Breakthrough",
        description="Medical researchers announce promising results in new treatment methodologies.",
    ),
    Article(
        author="Lisa Brown",
        title="E-commerce Growth Continues Strong",
        description="Online retail sales maintain upward trend as consumer behavior shifts permanently.",
    ),
    Article(
        author="David Taylor",
        title="Manufacturing Sector Shows Recovery",
        description="Industrial production increases for the third consecutive month, signaling economic recovery.",
    ),
)


class ArticleProvider(ABC):
    """Source of the articles served by the API."""

    @abstractmethod
    def list_articles(self) -> Sequence[Article]:
        """Return all articles in their canonical order."""
        ...


class SeedArticleProvider(ArticleProvider):
    """Serves a fixed tuple of articles, ``SEED_ARTICLES`` by default."""

    def __init__(self, articles: Sequence[Article] = SEED_ARTICLES) -> None:
        self._articles = tuple(articles)

    def list_articles(self) -> Sequence[Article]:
        return self._articles
