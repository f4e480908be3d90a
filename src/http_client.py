# src/http_client.py
"""HTTP boundary layer for the network-backed capabilities.

All outbound requests (session exchange, certificate probe) go through
http_fetch() so business code only ever sees a normalized HttpResponse
and tests can patch a single function.
"""

import json
from typing import Any

import httpx


class HttpResponse:
    """Normalized HTTP response for boundary layer."""

    def __init__(
        self, status_code: int, text: str, headers: dict[str, str], final_url: str
    ) -> None:
        """Initialize HTTP response with normalized Python values.

        Args:
            status_code: HTTP status code
            text: Response body as string
            headers: Response headers as Python dict
            final_url: Final URL after redirects

        """
        self.status_code = status_code
        self.text = text
        self.headers = headers
        self.final_url = final_url

    def json(self) -> Any:
        """Parse response text as JSON."""
        return json.loads(self.text)


async def http_fetch(
    url: str,
    method: str = "GET",
    headers: dict | None = None,
    json_body: dict | None = None,
    timeout_seconds: int = 30,
) -> HttpResponse:
    """Perform a request and return a normalized HttpResponse.

    TLS verification is left on: a request to the secure API only succeeds
    once the host trusts its certificate.

    Args:
        url: The URL to fetch
        method: HTTP method (GET, POST, etc.)
        headers: Request headers
        json_body: JSON body for POST requests
        timeout_seconds: Request timeout in seconds

    Raises:
        httpx.HTTPError: On connection, TLS or timeout failures
    """
    headers = headers or {}

    async with httpx.AsyncClient(follow_redirects=True, timeout=timeout_seconds) as client:
        response = await client.request(method, url, headers=headers, json=json_body)
        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            final_url=str(response.url),
        )


__all__ = [
    "HttpResponse",
    "http_fetch",
]
