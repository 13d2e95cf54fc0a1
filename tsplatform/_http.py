"""HTTP client wrapper for the platform API.

Handles error mapping, token header and request/response serialization.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from tsplatform.errors import raise_for_error_response

logger = logging.getLogger("tsplatform")

API_PREFIX = "/api/v2"


class HTTPClient:
    """Async HTTP client for the platform API.

    Wraps httpx.AsyncClient with:
    - Automatic error response mapping to PlatformError
    - ``Authorization: Token`` header
    - Request/response logging

    Transport failures (httpx.TransportError) propagate unchanged.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Platform base URL (e.g., "http://localhost:9999")
            token: API token sent with every request
            timeout: Default request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @staticmethod
    def _parse_json_or_error_payload(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
            if isinstance(payload, dict):
                return payload
            return {"data": payload}
        except ValueError:
            if response.status_code >= 400:
                raw_text = response.text or ""
                snippet_limit = 500
                snippet = raw_text[:snippet_limit]
                return {
                    "message": f"HTTP {response.status_code} returned non-JSON error response",
                    "details": {
                        "raw_response_snippet": snippet,
                        "raw_response_truncated": len(raw_text) > snippet_limit,
                    },
                }
            return {}

    async def __aenter__(self) -> HTTPClient:
        """Enter async context, creating HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            headers={
                "Authorization": f"Token {self._token}",
                "Accept": "application/json",
            },
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context, closing HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("HTTPClient not initialized. Use 'async with' context.")
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make an HTTP request to the platform API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE, etc.)
            path: API path below the /api/v2 prefix (e.g., "/buckets")
            json: Request body as dict (will be serialized)
            params: Query parameters; None values are dropped
            timeout: Override default timeout for this request

        Returns:
            Parsed JSON response body ({} for 204 No Content)

        Raises:
            PlatformError: On API error responses
        """
        headers: dict[str, str] = {}
        if json is not None:
            headers["Content-Type"] = "application/json"

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        url = f"{API_PREFIX}{path}"
        logger.debug("Request: %s %s params=%s", method, url, params)

        response = await self.client.request(
            method,
            url,
            json=json,
            params=params or None,
            headers=headers if headers else None,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

        logger.debug("Response: %s %s", response.status_code, url)

        if response.status_code == 204:
            return {}

        body = self._parse_json_or_error_payload(response)
        if response.status_code >= 400:
            raise_for_error_response(response.status_code, body)
        return body

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make a GET request."""
        return await self.request("GET", path, params=params, timeout=timeout)

    async def post(
        self,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make a POST request."""
        return await self.request("POST", path, json=json, timeout=timeout)

    async def patch(
        self,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make a PATCH request."""
        return await self.request("PATCH", path, json=json, timeout=timeout)

    async def delete(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make a DELETE request."""
        return await self.request("DELETE", path, params=params, timeout=timeout)
