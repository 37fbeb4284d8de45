"""
Application Bootstrap Tests
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from scaffold import bootstrap
from scaffold.bootstrap import create_app
from scaffold.common.errors import NotFoundError, RegistryError
from scaffold.config import Settings


def _failing_router() -> APIRouter:
    router = APIRouter(prefix="/boom")

    @router.get("/crash")
    async def crash():
        raise RuntimeError("secret internals")

    @router.get("/missing")
    async def missing():
        raise NotFoundError(message="Gone", details={"id": 1})

    return router


def _patch_settings(monkeypatch, **overrides) -> Settings:
    settings = Settings(**overrides)
    monkeypatch.setattr(bootstrap, "get_settings", lambda: settings)
    return settings


@pytest.mark.asyncio
async def test_health_and_docs(monkeypatch):
    _patch_settings(monkeypatch, DOCS_ENABLED=True)
    app = create_app("test-api", "Test", [], init_database=False)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
        assert resp.json() == {"status": "UP"}

        resp = await ac.get("/")
        assert resp.json()["version"] == bootstrap.APP_VERSION

        assert (await ac.get("/docs")).status_code == 200
        assert (await ac.get("/openapi.json")).json()["info"]["title"] == "test-api"


@pytest.mark.asyncio
async def test_docs_can_be_disabled(monkeypatch):
    _patch_settings(monkeypatch, DOCS_ENABLED=False)
    app = create_app("test-api", "Test", [], init_database=False)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        assert (await ac.get("/docs")).status_code == 404
        assert (await ac.get("/openapi.json")).status_code == 404


@pytest.mark.asyncio
async def test_routers_are_mounted_under_api(monkeypatch):
    _patch_settings(monkeypatch, DEBUG=False)
    app = create_app("test-api", "Test", [_failing_router()], init_database=False)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/api/boom/missing")

    assert resp.status_code == 404
    # Details are hidden outside debug mode
    assert resp.json() == {
        "error": {"message": "Gone", "type": "not_found_error", "code": "not_found"}
    }


@pytest.mark.asyncio
async def test_uncaught_exception_is_hidden(monkeypatch):
    _patch_settings(monkeypatch, DEBUG=False)
    app = create_app("test-api", "Test", [_failing_router()], init_database=False)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/boom/crash")

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "internal_error"
    assert "secret internals" not in resp.text


@pytest.mark.asyncio
async def test_uncaught_exception_in_debug_mode(monkeypatch):
    _patch_settings(monkeypatch, DEBUG=True)
    app = create_app("test-api", "Test", [_failing_router()], init_database=False)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/boom/crash")

    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["message"] == "secret internals"
    assert error["type"] == "RuntimeError"


def _fake_registry():
    registry = MagicMock()
    registry.register = AsyncMock()
    registry.deregister = AsyncMock()
    registry.close = AsyncMock()
    return registry


def _patch_registry(monkeypatch, registry):
    started = []
    stopped = []
    monkeypatch.setattr(bootstrap.ServiceRegistryClient, "from_settings", classmethod(lambda cls: registry))
    monkeypatch.setattr(bootstrap, "start_scheduler", lambda r: started.append(r))
    monkeypatch.setattr(bootstrap, "shutdown_scheduler", lambda: stopped.append(True))
    return started, stopped


@pytest.mark.asyncio
async def test_lifespan_registers_with_registry(monkeypatch):
    _patch_settings(monkeypatch, REGISTRY_ENABLED=True)
    registry = _fake_registry()
    started, stopped = _patch_registry(monkeypatch, registry)
    app = create_app("test-api", "Test", [], init_database=False)
    remote_client = MagicMock()
    remote_client.close = AsyncMock()

    async with app.router.lifespan_context(app):
        assert app.state.registry is registry
        registry.register.assert_awaited_once()
        assert started == [registry]
        app.state.remote_clients.append(remote_client)

    remote_client.close.assert_awaited_once()
    assert stopped == [True]
    registry.deregister.assert_awaited_once()
    registry.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_survives_unreachable_registry(monkeypatch):
    _patch_settings(monkeypatch, REGISTRY_ENABLED=True)
    registry = _fake_registry()
    registry.register.side_effect = httpx.ConnectError("refused")
    registry.deregister.side_effect = RegistryError(message="down")
    started, _ = _patch_registry(monkeypatch, registry)
    app = create_app("test-api", "Test", [], init_database=False)

    async with app.router.lifespan_context(app):
        # Heartbeat still scheduled so registration is retried
        assert started == [registry]

    registry.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_without_registry(monkeypatch):
    _patch_settings(monkeypatch, REGISTRY_ENABLED=False)
    from_settings = MagicMock()
    monkeypatch.setattr(bootstrap.ServiceRegistryClient, "from_settings", from_settings)
    init_db = AsyncMock()
    monkeypatch.setattr(bootstrap, "init_db", init_db)
    app = create_app("test-api", "Test", [], init_database=True)

    async with app.router.lifespan_context(app):
        assert app.state.registry is None

    init_db.assert_awaited_once()
    from_settings.assert_not_called()
