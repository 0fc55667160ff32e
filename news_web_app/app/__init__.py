"""
Application package initializer.

The service is split into small pieces: ``core`` holds configuration,
logging and error handling; ``schemas`` the request and response
models; ``services`` the article provider, request counter and news
logic; ``api`` the HTTP routes.  Handlers only translate between HTTP
and the service layer, so the business logic can be exercised without
an HTTP client.
"""

from .main import app, create_app  # noqa: F401
