"""
Remote Service Client Module

Base class for clients of other services: resolves the target instance, retries
failed calls and falls back to a caller-supplied default when the service stays
unavailable.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx

from scaffold.common.errors import RegistryError, RemoteCallError, ServiceError, UpstreamError
from scaffold.common.http_client import HttpClient
from scaffold.config import get_settings
from scaffold.registry import ServiceRegistryClient

logger = logging.getLogger(__name__)


class RemoteClient:
    """
    Remote Service Client

    Retry logic:
    - Transport error, registry lookup failure or status code >= 500: retry, up to
      max_attempts in total
    - Status code 4xx: raise RemoteCallError immediately with the remote status code
    - All attempts failed: call the fallback if given, otherwise raise UpstreamError
    """

    def __init__(
        self,
        service_name: str,
        base_url: Optional[str] = None,
        registry: Optional[ServiceRegistryClient] = None,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize Client

        Args:
            service_name: Registered name of the remote service
            base_url: Fixed base URL; when set the registry is not consulted
            registry: Registry used to resolve instances of service_name
            http_client: HTTP client, created on demand when omitted
        """
        settings = get_settings()
        self.service_name = service_name
        self.base_url = base_url.rstrip("/") if base_url else None
        self.registry = registry
        self.http = http_client or HttpClient()
        # Attempts per call
        self.max_attempts = max(1, settings.REMOTE_RETRY_MAX_ATTEMPTS)
        # Retry interval (ms)
        self.retry_delay_ms = settings.REMOTE_RETRY_DELAY_MS

    async def _resolve_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        if self.registry is None:
            raise ServiceError(
                message=f"No URL or service registry configured for service '{self.service_name}'",
                code="service_not_configured",
            )
        instance = await self.registry.choose(self.service_name)
        return instance.base_url

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _client_error(self, response: httpx.Response, method: str, path: str) -> RemoteCallError:
        message = f"{self.service_name} rejected {method} {path}"
        details: dict[str, Any] = {"service": self.service_name}
        try:
            body = response.json()
        except ValueError:
            body = response.text
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            message = body["error"].get("message", message)
        details["body"] = body
        return RemoteCallError(
            message=message,
            details=details,
            status_code=response.status_code,
        )

    async def _execute(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        last_error: Optional[str] = None

        for attempt in range(1, self.max_attempts + 1):
            url = path
            try:
                # Resolved on every attempt so a retry can reach another instance
                url = f"{await self._resolve_base_url()}{path}"
                response = await self.http.request(method, url, params=params, json=json)
            except (httpx.HTTPError, RegistryError) as e:
                last_error = f"{type(e).__name__}: {e}"
            else:
                if response.status_code < 400:
                    return self._decode(response)
                if response.status_code < 500:
                    raise self._client_error(response, method, path)
                last_error = f"status_code={response.status_code}"

            logger.warning(
                "Remote call failed: service=%s, method=%s, url=%s, error=%s, attempt=%s/%s",
                self.service_name,
                method,
                url,
                last_error,
                attempt,
                self.max_attempts,
            )
            if attempt < self.max_attempts:
                await asyncio.sleep(self.retry_delay_ms / 1000)

        raise self._unavailable(last_error)

    def _unavailable(self, error: Optional[str]) -> UpstreamError:
        return UpstreamError(
            message=f"Service '{self.service_name}' unavailable",
            code="remote_service_unavailable",
            details={"error": error, "attempts": self.max_attempts},
        )

    async def call(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
        fallback: Optional[Callable[[], Any]] = None,
    ) -> Any:
        """
        Call the remote service

        Args:
            method: HTTP method
            path: Path on the remote service, starting with "/"
            params: Query parameters
            json: JSON request body
            fallback: Returns the result to use when the service is unavailable

        Returns:
            Any: Decoded JSON body, None for empty responses

        Raises:
            RemoteCallError: Remote service rejected the request (4xx)
            UpstreamError: Remote service unavailable and no fallback given
            ServiceError: No instance could be resolved and no fallback given
        """
        try:
            return await self._execute(method, path, params=params, json=json)
        except RemoteCallError:
            raise
        except (UpstreamError, ServiceError) as e:
            error = e
        except httpx.HTTPError as e:
            error = self._unavailable(f"{type(e).__name__}: {e}")
            error.__cause__ = e

        if fallback is None:
            raise error
        logger.warning(
            "Using fallback for %s %s on service %s: %s",
            method,
            path,
            self.service_name,
            error.message,
        )
        return fallback()

    async def close(self) -> None:
        await self.http.close()
