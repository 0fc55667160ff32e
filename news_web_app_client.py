"""News Web App API client.

A thin wrapper around the News Web App REST API built on ``requests``.
It exposes one method per endpoint:

* :meth:`get_name` – the application name as an HTML snippet.
* :meth:`list_news` – articles, optionally filtered by author and limited.
* :meth:`welcome` – a personalised greeting.
* :meth:`get_stats` – server statistics.
* :meth:`find_by_author` – articles by an exact author name.
* :meth:`submit_article` – send a new article (echoed back, not stored).

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  Network problems are
logged and reported the same way instead of being raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class NewsWebAppClient:
    """Client for the News Web App API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        as_text: bool = False,
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/news``).
            params: Query parameters; entries whose value is ``None`` are dropped.
            json_body: JSON body to send with the request.
            as_text: Return the body as text instead of parsed JSON.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if as_text:
                return response.text, None
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def get_name(self) -> Result:
        """Return the application name HTML, e.g. ``<h3>News Web App</h3>``."""
        return self._request("GET", "/name", as_text=True)

    def list_news(self, author: Optional[str] = None, limit: Optional[int] = None) -> Result:
        """List articles.

        Args:
            author: Case-insensitive substring of the author name.
            limit: Maximum number of articles; the server defaults to 10.
        Returns:
            A tuple ``(response, error)`` where ``response`` is the full
            envelope including ``articles``.
        """
        return self._request("GET", "/news", params={"author": author, "limit": limit})

    def welcome(self, name: Optional[str] = None, category: Optional[str] = None) -> Result:
        return self._request("GET", "/welcome", params={"name": name, "category": category})

    def get_stats(self) -> Result:
        return self._request("GET", "/stats")

    def find_by_author(self, name: str) -> Result:
        """Search articles by exact author name (case-insensitive)."""
        return self._request("GET", "/news/author", params={"name": name})

    def submit_article(self, author: str, title: str, description: str) -> Result:
        payload = {"author": author, "title": title, "description": description}
        return self._request("POST", "/news", json_body=payload)
