"""Entry point for the News Web App.

Starts the API under uvicorn.  Host and port come from the ``HOST`` and
``PORT`` environment variables (defaults ``0.0.0.0`` and ``8080``); see
``news_web_app/app/core/config.py`` for the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from news_web_app.app.core.config import settings
from news_web_app.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
