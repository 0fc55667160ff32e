"""
Top‑level package for the News Web App.

Makes ``news_web_app`` importable so that the service can be referenced
by its fully qualified name, e.g. ``news_web_app.app.main:app`` when
launching uvicorn.  All functionality lives in submodules under
``app``.
"""

__all__ = []
