"""
HTTP Client Wrapper Module

Provides a unified asynchronous HTTP client for the service registry and remote services.
"""

from typing import Any, Optional

import httpx

from scaffold.config import get_settings


class HttpClient:
    """
    Asynchronous HTTP Client Wrapper

    Wraps httpx.AsyncClient, providing unified request methods and timeout configuration.
    The underlying client is created lazily and reused until close() is called.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: Optional[int] = None,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP Client

        Args:
            base_url: Base URL
            timeout: Request timeout (seconds), defaults to configuration
            headers: Default request headers
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        settings = get_settings()
        self.base_url = base_url
        self.timeout = timeout or settings.HTTP_TIMEOUT
        self.default_headers = headers or {}
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """
        Get or create HTTP client instance

        Returns:
            httpx.AsyncClient: HTTP client instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self.default_headers,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP Client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        json: Optional[Any] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send HTTP Request

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL (absolute, or relative to base_url)
            headers: Request headers
            json: JSON request body
            **kwargs: Other httpx parameters

        Returns:
            httpx.Response: HTTP response
        """
        client = await self._get_client()
        return await client.request(
            method=method,
            url=url,
            headers=headers,
            json=json,
            **kwargs,
        )

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send GET Request"""
        return await self.request("GET", url, **kwargs)

    async def post(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        json: Optional[Any] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send POST Request"""
        return await self.request("POST", url, headers=headers, json=json, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send PUT Request"""
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send DELETE Request"""
        return await self.request("DELETE", url, **kwargs)
