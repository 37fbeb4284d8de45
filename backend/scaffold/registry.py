"""
Service Registry Client Module

Registers this process with a Eureka-compatible service registry over its REST API,
renews the lease, and resolves instances of other services.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from scaffold.common.errors import RegistryError, ServiceError
from scaffold.common.http_client import HttpClient
from scaffold.config import get_settings

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


@dataclass
class ServiceInstance:
    """
    Service Instance

    One registered instance of an application, as reported by the registry.
    """

    instance_id: str
    app: str
    host: str
    port: int
    status: str = "UP"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


class ServiceRegistryClient:
    """
    Service Registry Client

    Application names are upper-cased, as the registry stores them.
    Instance selection is round-robin per application.
    """

    def __init__(
        self,
        registry_url: str,
        app_name: str,
        host: str,
        port: int,
        lease_renewal_seconds: int = 30,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize Client

        Args:
            registry_url: Registry base URL, e.g. http://localhost:8761/eureka
            app_name: Name this process registers under
            host: Address advertised to other services
            port: Port advertised to other services
            lease_renewal_seconds: Heartbeat interval announced to the registry
            http_client: HTTP client, created on demand when omitted
        """
        self.registry_url = registry_url.rstrip("/")
        self.app_name = app_name
        self.app_id = app_name.upper()
        self.host = host
        self.port = port
        self.lease_renewal_seconds = lease_renewal_seconds
        self.instance_id = f"{host}:{app_name}:{port}"
        self.http = http_client or HttpClient()
        self.registered = False
        # Round-robin counters per application
        self._counters: dict[str, int] = {}
        self._lock: Optional[asyncio.Lock] = None

    @classmethod
    def from_settings(cls) -> "ServiceRegistryClient":
        settings = get_settings()
        return cls(
            registry_url=settings.REGISTRY_URL,
            app_name=settings.APP_NAME,
            host=settings.INSTANCE_HOST,
            port=settings.PORT,
            lease_renewal_seconds=settings.REGISTRY_HEARTBEAT_SECONDS,
        )

    @property
    def lock(self) -> asyncio.Lock:
        """Get lock (lazy loading)"""
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def _app_url(self, app_id: str) -> str:
        return f"{self.registry_url}/apps/{app_id}"

    def _instance_url(self) -> str:
        return f"{self._app_url(self.app_id)}/{self.instance_id}"

    @staticmethod
    def _check(response: httpx.Response, action: str) -> None:
        if response.status_code >= 300:
            raise RegistryError(
                message=f"Service registry {action} failed",
                details={"status_code": response.status_code, "body": response.text},
            )

    def instance_document(self) -> dict[str, Any]:
        """Build the instance registration document"""
        base_url = f"http://{self.host}:{self.port}"
        return {
            "instance": {
                "instanceId": self.instance_id,
                "hostName": self.host,
                "app": self.app_id,
                "ipAddr": self.host,
                "status": "UP",
                "port": {"$": self.port, "@enabled": "true"},
                "securePort": {"$": 443, "@enabled": "false"},
                "homePageUrl": f"{base_url}/",
                "statusPageUrl": f"{base_url}/health",
                "healthCheckUrl": f"{base_url}/health",
                "vipAddress": self.app_name,
                "secureVipAddress": self.app_name,
                "dataCenterInfo": {
                    "@class": "com.netflix.appinfo.InstanceInfo$DefaultDataCenterInfo",
                    "name": "MyOwn",
                },
                "leaseInfo": {
                    "renewalIntervalInSecs": self.lease_renewal_seconds,
                    "durationInSecs": self.lease_renewal_seconds * 3,
                },
            }
        }

    async def register(self) -> None:
        """Register this instance"""
        response = await self.http.post(
            self._app_url(self.app_id),
            headers=JSON_HEADERS,
            json=self.instance_document(),
        )
        self._check(response, "registration")
        self.registered = True
        logger.info(
            "Registered with service registry: app=%s, instance_id=%s",
            self.app_id,
            self.instance_id,
        )

    async def renew(self) -> None:
        """
        Renew the lease of this instance

        The registry answers 404 once it has evicted the instance; register again then.
        """
        response = await self.http.put(self._instance_url(), headers=JSON_HEADERS)
        if response.status_code == 404:
            logger.warning(
                "Lease not found in service registry, re-registering: instance_id=%s",
                self.instance_id,
            )
            await self.register()
            return
        self._check(response, "lease renewal")
        logger.debug("Lease renewed: instance_id=%s", self.instance_id)

    async def deregister(self) -> None:
        """Remove this instance from the registry"""
        if not self.registered:
            return
        response = await self.http.delete(self._instance_url(), headers=JSON_HEADERS)
        self._check(response, "deregistration")
        self.registered = False
        logger.info("Deregistered from service registry: instance_id=%s", self.instance_id)

    async def get_instances(self, app_name: str) -> list[ServiceInstance]:
        """
        Get the UP instances of an application

        Args:
            app_name: Registered application name (case insensitive)

        Returns:
            list[ServiceInstance]: Instances in registry order, empty when unknown
        """
        app_id = app_name.upper()
        response = await self.http.get(self._app_url(app_id), headers=JSON_HEADERS)
        if response.status_code == 404:
            return []
        self._check(response, "lookup")

        try:
            payload = response.json()
        except ValueError as e:
            raise RegistryError(
                message="Service registry returned an invalid lookup response",
                details={"status_code": response.status_code, "body": response.text},
            ) from e

        raw = payload.get("application", {}).get("instance", [])
        # A single instance may be rendered as an object instead of a list
        if isinstance(raw, dict):
            raw = [raw]

        instances = []
        for item in raw:
            if item.get("status") != "UP":
                continue
            port = item.get("port", {})
            instances.append(
                ServiceInstance(
                    instance_id=item.get("instanceId") or item.get("hostName", ""),
                    app=app_id,
                    host=item.get("ipAddr") or item.get("hostName", ""),
                    port=int(port.get("$", 80)) if isinstance(port, dict) else int(port),
                    status="UP",
                )
            )
        return instances

    async def choose(self, app_name: str) -> ServiceInstance:
        """
        Choose one instance of an application (round-robin)

        Raises:
            ServiceError: No UP instance registered
        """
        instances = await self.get_instances(app_name)
        if not instances:
            raise ServiceError(
                message=f"No available instance of service '{app_name}'",
                code="no_available_instance",
            )

        app_id = app_name.upper()
        async with self.lock:
            counter = self._counters.get(app_id, 0)
            self._counters[app_id] = counter + 1

        return instances[counter % len(instances)]

    async def close(self) -> None:
        await self.http.close()
