"""
Pydantic models for articles and the response envelopes built around them.

``Article`` is both the shape of the seed data and the body accepted by
``POST /news``.  It is frozen so the seed list cannot be modified after
start‑up.  Envelope fields are declared in the order they appear in the
JSON output.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Article(BaseModel):
    """A news article.  All three fields are required strings."""

    author: str = Field(..., examples=["Jane Doe"])
    title: str = Field(..., examples=["New Article Title"])
    description: str = Field(..., examples=["Article description here."])

    model_config = ConfigDict(frozen=True)


class Envelope(BaseModel):
    """Base class for responses; serialises field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewsListResponse(Envelope):
    status: str = "ok"
    total: int
    request_id: int
    timestamp: datetime
    articles: List[Article]


class WelcomeResponse(Envelope):
    message: str
    category: str
    request_id: int
    timestamp: datetime
    status: str = "ok"


class StatsResponse(Envelope):
    """Server statistics.  Reading them does not count as a request."""

    total_requests: int
    server_time: datetime
    status: str = "running"
    application_name: str


class AuthorSearchResponse(Envelope):
    """Result of an exact author search; ``status`` is ``no_results`` when empty."""

    status: str
    searched_author: str
    total: int
    request_id: int
    timestamp: datetime
    articles: List[Article]


class SubmissionResponse(Envelope):
    status: str = "received"
    received_article: Article
    request_id: int
    timestamp: datetime
