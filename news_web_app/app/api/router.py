"""
Top‑level router.

The endpoints are served from the root path (``/news``, ``/stats``...),
which is where existing clients such as the web UI expect them.
"""

from fastapi import APIRouter

from .endpoints import info, news

router = APIRouter()

router.include_router(info.router, tags=["info"])
# The news router defines "/news" and "/news/author" itself.
router.include_router(news.router, tags=["news"])
