"""Identity extraction tests — ANONYMOUS / IDENTIFIED / REJECTED.

Learn: A request without a bearer token proceeds anonymously and
only fails where a handler needs an account. A request WITH a bad
token is rejected up front, even on routes that wouldn't need it.
"""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from bloglist.auth.dependencies import bearer_token
from bloglist.auth.jwt import TokenCodec

REJECTED = {"error": "token missing or invalid"}


def test_bearer_token_parsing():
    assert bearer_token(None) is None
    assert bearer_token("") is None
    assert bearer_token("Basic dXNlcjpwYXNz") is None
    assert bearer_token("Bearer ") is None
    assert bearer_token("bearer abc") is None
    assert bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.asyncio
async def test_anonymous_read_is_allowed(client):
    r = await client.get("/api/blogs")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_anonymous(client):
    r = await client.get("/api/blogs", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert r.status_code == 200

    r = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "http://x"},
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_rejected_even_on_reads(client):
    r = await client.get("/api/blogs", headers={"Authorization": "Bearer not.a.token"})
    assert r.status_code == 401
    assert r.json() == REJECTED
    assert r.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_expired_token_rejected(client, make_user, settings):
    await make_user("root")
    issued = datetime.now(timezone.utc) - timedelta(hours=3)
    stale = TokenCodec(settings, clock=lambda: issued)

    r = await client.post("/api/login", json={"username": "root", "password": "sekret"})
    account = SimpleNamespace(id=uuid.UUID(r.json()["id"]), username="root")

    r = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "http://x"},
        headers={"Authorization": f"Bearer {stale.issue(account)}"},
    )
    assert r.status_code == 401
    assert r.json() == REJECTED


@pytest.mark.asyncio
async def test_token_from_other_secret_rejected(client, make_user, settings):
    user = await make_user("root")
    forged = TokenCodec(settings.model_copy(update={"jwt_secret": "attacker"}))
    account = SimpleNamespace(id=uuid.UUID(user["id"]), username="root")

    r = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "http://x"},
        headers={"Authorization": f"Bearer {forged.issue(account)}"},
    )
    assert r.status_code == 401
    assert r.json() == REJECTED


@pytest.mark.asyncio
async def test_token_for_unknown_account_rejected(client, app):
    ghost = SimpleNamespace(id=uuid.uuid4(), username="ghost")
    token = app.state.token_codec.issue(ghost)

    r = await client.get("/api/blogs", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == REJECTED


@pytest.mark.asyncio
async def test_valid_token_identifies_account(client, make_user):
    user = await make_user("root")
    r = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "http://x"},
        headers=user["headers"],
    )
    assert r.status_code == 201
    assert r.json()["user"]["id"] == user["id"]


@pytest.mark.asyncio
async def test_rejected_token_short_circuits_before_404(client):
    """A bad token is a 401 even when the target doesn't exist."""
    r = await client.delete(
        f"/api/blogs/{uuid.uuid4()}", headers={"Authorization": "Bearer bad"}
    )
    assert r.status_code == 401
