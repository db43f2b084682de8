"""Tests for middleware and the error boundary — headers, request IDs,
uniform error bodies."""

import pytest
from starlette.requests import Request

from bloglist.api.errors import unhandled_error_handler


@pytest.mark.asyncio
async def test_security_headers(client):
    r = await client.get("/api/health")
    assert r.status_code == 200
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["Referrer-Policy"] == "no-referrer"
    assert r.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_no_hsts_on_http(client):
    r = await client.get("/api/health")
    assert "Strict-Transport-Security" not in r.headers


@pytest.mark.asyncio
async def test_request_id_generated(client):
    r1 = await client.get("/api/health")
    r2 = await client.get("/api/health")
    assert "X-Request-ID" in r1.headers
    assert r1.headers["X-Request-ID"] != r2.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_request_id_propagated(client):
    r = await client.get("/api/health", headers={"X-Request-ID": "test-trace-12345"})
    assert r.headers["X-Request-ID"] == "test-trace-12345"


@pytest.mark.asyncio
async def test_unknown_endpoint(client):
    r = await client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "unknown endpoint"}


@pytest.mark.asyncio
async def test_error_responses_carry_security_headers(client):
    r = await client.get("/api/blogs", headers={"Authorization": "Bearer junk"})
    assert r.status_code == 401
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Request-ID" in r.headers


@pytest.mark.asyncio
async def test_unhandled_error_is_generic_500():
    request = Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/api/blogs",
            "headers": [],
            "query_string": b"",
        }
    )
    r = await unhandled_error_handler(request, RuntimeError("db password is hunter2"))
    assert r.status_code == 500
    assert r.body == b'{"error":"internal server error"}'
