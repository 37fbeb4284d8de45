"""
Consumer API Integration Tests

The consumer application calls the provider application in-process through
an ASGI transport.
"""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from scaffold.api.consumer import get_category_client
from scaffold.api.deps import get_db
from scaffold.common.http_client import HttpClient
from scaffold.consumer import app as consumer_app
from scaffold.main import app as provider_app
from scaffold.remote import CategoryClient


def _category_client(transport: httpx.AsyncBaseTransport) -> CategoryClient:
    client = CategoryClient(base_url="http://provider", http_client=HttpClient(transport=transport))
    client.retry_delay_ms = 0
    return client


@pytest_asyncio.fixture
async def client(db_session):
    provider_app.dependency_overrides[get_db] = lambda: db_session
    category_client = _category_client(ASGITransport(app=provider_app))
    consumer_app.dependency_overrides[get_category_client] = lambda: category_client

    async with AsyncClient(transport=ASGITransport(app=consumer_app), base_url="http://test") as ac:
        yield ac

    await category_client.close()
    provider_app.dependency_overrides = {}
    consumer_app.dependency_overrides = {}


@pytest_asyncio.fixture
async def unavailable_client():
    category_client = _category_client(httpx.MockTransport(lambda request: httpx.Response(503)))
    consumer_app.dependency_overrides[get_category_client] = lambda: category_client

    async with AsyncClient(transport=ASGITransport(app=consumer_app), base_url="http://test") as ac:
        yield ac

    await category_client.close()
    consumer_app.dependency_overrides = {}


@pytest.mark.asyncio
async def test_crud_through_provider(client):
    resp = await client.post("/api/consumer/categories", json={"name": "books", "status": 1})
    assert resp.status_code == 201, resp.text
    created = resp.json()

    resp = await client.get(f"/api/consumer/categories/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "books"

    resp = await client.put(
        f"/api/consumer/categories/{created['id']}",
        json={"name": "ebooks", "status": 0},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "ebooks"

    resp = await client.get("/api/consumer/categories")
    assert [c["name"] for c in resp.json()] == ["ebooks"]

    resp = await client.get("/api/consumer/categories/count")
    assert resp.json() == {"count": 1}

    resp = await client.delete(f"/api/consumer/categories/{created['id']}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/consumer/categories/{created['id']}")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "category_not_found"


@pytest.mark.asyncio
async def test_page_through_provider(client):
    for name, status in [("notebook", 1), ("book", 0), ("bookmark", 1)]:
        await client.post("/api/consumer/categories", json={"name": name, "status": status})

    resp = await client.get("/api/consumer/categories/page?name=book&status=1&page_size=1&page_number=2")

    assert resp.status_code == 200, resp.text
    page = resp.json()
    assert page["total_records"] == 2
    assert page["total_pages"] == 2
    assert [c["name"] for c in page["bean_list"]] == ["bookmark"]


@pytest.mark.asyncio
async def test_provider_client_errors_are_propagated(client):
    await client.post("/api/consumer/categories", json={"name": "books"})

    resp = await client.post("/api/consumer/categories", json={"name": "books"})

    assert resp.status_code == 409
    error = resp.json()["error"]
    assert error["code"] == "remote_call_error"
    assert "already exists" in error["message"]


@pytest.mark.asyncio
async def test_reads_fall_back_when_provider_unavailable(unavailable_client):
    resp = await unavailable_client.get("/api/consumer/categories/page?page_number=2&page_size=5")
    assert resp.status_code == 200
    assert resp.json() == {
        "page_number": 2,
        "page_size": 5,
        "total_records": 0,
        "bean_list": [],
        "total_pages": 0,
    }

    resp = await unavailable_client.get("/api/consumer/categories")
    assert resp.json() == []

    resp = await unavailable_client.get("/api/consumer/categories/count")
    assert resp.json() == {"count": 0}

    resp = await unavailable_client.get("/api/consumer/categories/1")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_writes_fail_when_provider_unavailable(unavailable_client):
    resp = await unavailable_client.post("/api/consumer/categories", json={"name": "books"})

    assert resp.status_code == 502
    assert resp.json()["error"]["code"] == "remote_service_unavailable"
