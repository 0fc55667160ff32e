import pytest

from news_web_app.app.core.config import Settings

ENV_VARS = ("PROJECT_NAME", "PORT", "HOST", "DEFAULT_LIMIT", "CORS_ORIGINS", "DEBUG", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings()
    assert s.project_name == "News Web App"
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.default_limit == 10
    assert s.debug is False
    assert s.log_level == "INFO"
    assert s.cors_origin_list == ["http://localhost:4200"]


def test_environment_overrides(clean_env):
    clean_env.setenv("PORT", "9090")
    clean_env.setenv("DEFAULT_LIMIT", "3")
    clean_env.setenv("DEBUG", "yes")
    clean_env.setenv("PROJECT_NAME", "Daily Wire")
    s = Settings()
    assert s.port == 9090
    assert s.default_limit == 3
    assert s.debug is True
    assert s.project_name == "Daily Wire"


def test_cors_origin_list_splits_and_strips():
    s = Settings(cors_origins="http://a.test, http://b.test,,")
    assert s.cors_origin_list == ["http://a.test", "http://b.test"]


def test_cors_wildcard():
    assert Settings(cors_origins="*").cors_origin_list == ["*"]
