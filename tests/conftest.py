import pytest
from fastapi.testclient import TestClient

from news_web_app.app.core.config import Settings
from news_web_app.app.main import create_app
from news_web_app.app.services.article_provider import SeedArticleProvider
from news_web_app.app.services.news_service import NewsService
from news_web_app.app.services.request_counter import RequestCounter


@pytest.fixture
def app_settings():
    return Settings(
        project_name="News Web App",
        cors_origins="http://localhost:4200",
        default_limit=10,
    )


@pytest.fixture
def app(app_settings):
    """A fresh application with its own request counter."""
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def service():
    return NewsService(SeedArticleProvider(), RequestCounter())


@pytest.fixture
def sample_article():
    return {"author": "Jane Doe", "title": "T", "description": "D"}
