"""Health probes, landing page, unmatched routes and the catch-all error handler."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

import records_api.infrastructure.database as db_module
from records_api.api.error_handlers import register_error_handlers
from records_api.core.errors import OperationError


async def test_health_returns_fixed_payload(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "Server is running"}


async def test_readiness_reports_database_healthy(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_readiness_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_root_serves_landing_page(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Raushan Kumar" in res.text


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/unknown"),
    ("GET", "/no/such/page"),
    ("POST", "/api/health"),
    ("DELETE", "/api/contacts"),
])
async def test_unmatched_route_returns_404(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


@pytest.fixture
async def faulty_client():
    """Minimal app with the global handlers and routes that fail."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("connection string with password=secret")

    @app.get("/storage")
    async def storage():
        raise OperationError(
            "Connection or operational error", "find",
            cause=ConnectionError("db host unreachable"),
        )

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_is_generic_500(faulty_client):
    res = await faulty_client.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}
    assert "secret" not in res.text


async def test_operation_error_hides_cause(faulty_client):
    res = await faulty_client.get("/storage")
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}
    assert "unreachable" not in res.text
