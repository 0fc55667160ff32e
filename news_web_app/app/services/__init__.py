"""
Service layer.

``NewsService`` holds the article logic.  It reads articles through an
``ArticleProvider`` and numbers requests with a ``RequestCounter``, both
passed in by the application factory, so a real storage backend can
replace the seed data without changing API handlers.
"""
