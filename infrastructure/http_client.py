"""Shared blocking HTTP client with configurable timeout."""

from typing import Any, Optional

import httpx


class HttpClient:
    """Thin wrapper around httpx.Client with a configurable timeout.

    The timeout bounds connect, read, write and pool acquisition independently.
    One instance per external service keeps timeouts independently configurable.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout), transport=transport
        )

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(url, **kwargs)

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.get(url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
