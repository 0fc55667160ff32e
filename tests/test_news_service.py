"""Service-level tests; no HTTP involved."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from news_web_app.app.schemas.article import Article
from news_web_app.app.services.article_provider import SEED_ARTICLES, SeedArticleProvider
from news_web_app.app.services.news_service import NewsService
from news_web_app.app.services.request_counter import RequestCounter


def test_default_listing_returns_all_seed_articles(service):
    result = service.list_articles()
    assert result.status == "ok"
    assert result.total == 7
    assert result.articles == list(SEED_ARTICLES)


def test_author_filter_is_case_insensitive_substring(service):
    result = service.list_articles(author="john")
    # "john" also matches "Sarah Johnson".
    assert [a.author for a in result.articles] == ["John Smith", "Sarah Johnson"]


def test_author_filter_uppercase(service):
    result = service.list_articles(author="SMITH")
    assert [a.author for a in result.articles] == ["John Smith"]


def test_empty_author_filter_is_ignored(service):
    assert service.list_articles(author="").total == 7


@pytest.mark.parametrize("limit", [1, 3, 6])
def test_limit_below_count_keeps_first_items(service, limit):
    result = service.list_articles(limit=limit)
    assert result.articles == list(SEED_ARTICLES[:limit])
    assert result.total == limit


@pytest.mark.parametrize("limit", [7, 8, 100])
def test_limit_at_or_above_count_returns_everything(service, limit):
    assert service.list_articles(limit=limit).articles == list(SEED_ARTICLES)


@pytest.mark.parametrize("limit", [0, -1, -50])
def test_non_positive_limit_does_not_truncate(service, limit):
    # Zero and negative limits fall through the truncation check.
    assert service.list_articles(limit=limit).total == 7


def test_filter_then_limit(service):
    result = service.list_articles(author="o", limit=2)
    assert [a.author for a in result.articles] == ["John Smith", "Sarah Johnson"]


def test_default_limit_applies():
    service = NewsService(SeedArticleProvider(), RequestCounter(), default_limit=2)
    assert service.list_articles().total == 2


def test_find_by_author_exact_match(service):
    result = service.find_by_author("John Smith")
    assert result.status == "ok"
    assert result.searched_author == "John Smith"
    assert result.total == 1
    assert result.articles[0].title == "Tech Stocks Rise as Market Shows Optimism"


def test_find_by_author_ignores_case(service):
    assert service.find_by_author("john smith").total == 1


def test_find_by_author_is_not_substring(service):
    result = service.find_by_author("John")
    assert result.status == "no_results"
    assert result.articles == []


def test_find_by_author_no_results(service):
    result = service.find_by_author("Nonexistent")
    assert result.status == "no_results"
    assert result.total == 0


def test_welcome_message(service):
    result = service.welcome(name="Alice", category="sports")
    assert result.message.startswith("Welcome to News Web App, Alice! Your request was processed at ")
    assert result.category == "sports"
    assert result.status == "ok"


def test_welcome_defaults(service):
    result = service.welcome()
    assert "Guest" in result.message
    assert result.category == "general"


def test_submit_article_echoes_without_storing(service):
    article = Article(author="Jane Doe", title="T", description="D")
    result = service.submit_article(article)
    assert result.status == "received"
    assert result.received_article == article
    assert article not in service.list_articles().articles


def test_request_ids_increase_per_call(service):
    ids = [
        service.list_articles().request_id,
        service.welcome().request_id,
        service.find_by_author("x").request_id,
        service.submit_article(Article(author="a", title="b", description="c")).request_id,
    ]
    assert ids == [1, 2, 3, 4]


def test_stats_reads_without_incrementing(service):
    service.list_articles()
    first = service.stats()
    second = service.stats()
    assert first.total_requests == second.total_requests == 1
    assert first.status == "running"
    assert first.application_name == "News Web App"


def test_app_name_is_fixed(service):
    before = service.app_name_html()
    service.list_articles()
    service.welcome()
    assert service.app_name_html() == before == "<h3>News Web App</h3>"


def test_concurrent_requests_get_distinct_ids(service):
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: service.list_articles().request_id, range(200)))
    assert len(set(ids)) == 200
    assert service.stats().total_requests == 200


def test_seed_articles_are_immutable():
    with pytest.raises(ValidationError):
        SEED_ARTICLES[0].author = "Someone Else"


def test_custom_provider():
    provider = SeedArticleProvider([Article(author="Ann", title="x", description="y")])
    service = NewsService(provider, RequestCounter())
    assert service.list_articles().total == 1
