"""HTTP text client for fetching publication listings.

Provides ``TextClient``, a thin wrapper over ``httpx.Client`` that
resolves paths against a base URL and sends a User-Agent header. Each
request is attempted once; a non-success status or a network failure is
raised to the caller as the httpx exception.

Usage::

    from pubgraph.api_client import TextClient

    with TextClient(base_url="https://lab.example.org/data") as client:
        text = client.get_text("publicacoesPorMembro.csv")
"""

from __future__ import annotations

import httpx

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "pubgraph/0.1"


class TextClient:
    """HTTP client returning response bodies as text.

    Args:
        base_url: Optional base URL that relative paths are joined to.
        timeout: Request timeout in seconds (default 30).
        user_agent: User-Agent header value.
        transport: Optional ``httpx.BaseTransport``, e.g.
            ``httpx.MockTransport`` in tests.

    Examples:
        >>> with TextClient(base_url="https://example.org") as c:
        ...     csv_text = c.get_text("/pubs.csv")
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._request_count = 0

        client_kwargs = {
            "timeout": timeout,
            "headers": {"User-Agent": user_agent},
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport

        self._http = httpx.Client(**client_kwargs)

    def get_text(self, path: str) -> str:
        """GET *path* and return the decoded body.

        Args:
            path: URL path (relative to base_url) or absolute URL.

        Returns:
            Response body as a string.

        Raises:
            httpx.HTTPStatusError: On a non-success status.
            httpx.RequestError: If the request cannot be completed.
        """
        url = self.build_url(path)
        self._request_count += 1
        response = self._http.get(url)
        response.raise_for_status()
        return response.text

    @property
    def stats(self) -> dict:
        """Number of HTTP requests sent."""
        return {"requests": self._request_count}

    def build_url(self, path: str) -> str:
        """Resolve *path* against the base URL.

        Absolute ``http(s)://`` URLs are returned unchanged.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if self.base_url:
            return f"{self.base_url}/{path.lstrip('/')}"
        return path

    def close(self) -> None:
        if self._http:
            self._http.close()
            self._http = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
