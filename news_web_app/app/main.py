"""
Main entrypoint for the News Web App.

This module assembles the FastAPI application: logging, CORS, error
handlers, the news service and the routes.  ``create_app`` builds an
independent application with its own request counter, which is what
tests use; ``app`` is the instance created at import time for uvicorn::

    uvicorn news_web_app.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.article_provider import ArticleProvider, SeedArticleProvider
from .services.news_service import NewsService
from .services.request_counter import RequestCounter

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    provider: Optional[ArticleProvider] = None,
    counter: Optional[RequestCounter] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Configuration to use.  Defaults to the module level ``settings``
        read from the environment.
    provider : Optional[ArticleProvider]
        Source of articles.  Defaults to the built‑in seed list.
    counter : Optional[RequestCounter]
        Request counter.  A new counter starting at zero is created
        when omitted, so every app numbers its requests independently.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )

    # The web UI is served from a different origin than the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.state.news_service = NewsService(
        provider or SeedArticleProvider(),
        counter if counter is not None else RequestCounter(),
        app_name=app_settings.project_name,
        default_limit=app_settings.default_limit,
    )
    app.include_router(router)

    logger.info("%s %s ready", app_settings.project_name, app_settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
