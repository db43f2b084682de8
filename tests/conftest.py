"""Test fixtures — a fresh app and in-memory database per test.

Learn: Each test builds its own app through create_app() with explicit
Settings, so no BLOGLIST_* env vars are needed. The database is SQLite
in memory (aiosqlite + StaticPool keeps one connection alive), with
tables created directly from the models. bcrypt runs at its minimum
cost (4) to keep the suite fast. The cost is configuration, the code
path is the same.

httpx's ASGITransport doesn't run lifespan events, which is fine:
everything the app needs is built in create_app().
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bloglist.config import Settings
from bloglist.db.engine import create_tables
from bloglist.main import create_app

TEST_SECRET = "test-secret-do-not-use-in-production"


@pytest.fixture()
def settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite+aiosqlite://",
        password_hash_rounds=4,
        access_token_expire_minutes=60,
    )


@pytest_asyncio.fixture()
async def app(settings):
    app = create_app(settings)
    await create_tables(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture()
async def db_session(app):
    """A session on the app's database, for inspecting stored state."""
    async with app.state.session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def make_user(client):
    """Factory: register an account via the API, log in, return id + headers.

    Learn: Goes through the real endpoints (no dependency overrides), so
    every test that uses it exercises registration, login, and the
    token the identity stage will later decode.
    """

    async def _make(username: str, password: str = "sekret", name: str | None = None):
        r = await client.post(
            "/api/users",
            json={"username": username, "name": name or username.title(), "password": password},
        )
        assert r.status_code == 201, r.text
        r = await client.post(
            "/api/login", json={"username": username, "password": password}
        )
        assert r.status_code == 200, r.text
        body = r.json()
        return {
            "id": body["id"],
            "username": username,
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _make


@pytest_asyncio.fixture()
async def make_blog(client):
    """Factory: create a blog as the given user, return its JSON."""

    async def _make(user: dict, title: str = "Go To Statement Considered Harmful", **fields):
        payload = {
            "title": title,
            "author": fields.pop("author", "Edsger W. Dijkstra"),
            "url": fields.pop("url", "https://example.com/harmful"),
            **fields,
        }
        r = await client.post("/api/blogs", json=payload, headers=user["headers"])
        assert r.status_code == 201, r.text
        return r.json()

    return _make
