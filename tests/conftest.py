"""
Shared fixtures.

Each test gets its own application built around an in-memory SQLite
database, so nothing leaks between tests. Clients are created per user so
that every simulated browser keeps its own session cookie.
"""

import os

# Keep the module-level app in app.main off the production database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.config import Settings
from app.db.init_db import create_all_tables
from app.main import create_app

BASE_URL = "http://testserver"


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        ENVIRONMENT="test",
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    # httpx's ASGITransport does not run the lifespan, so create the schema here
    create_all_tables(application.state.engine)
    yield application
    application.state.engine.dispose()


@pytest.fixture
def db(app):
    """A session on the same database the application uses"""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest_asyncio.fixture
async def make_client(app):
    """
    Factory for independent clients (separate cookie jars).

    Usage:
        ann = await make_client()
    """
    clients = []

    async def _make(raise_app_exceptions: bool = True) -> AsyncClient:
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = AsyncClient(transport=transport, base_url=BASE_URL)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest_asyncio.fixture
async def client(make_client):
    return await make_client()


async def signup(client: AsyncClient, username: str, **overrides) -> dict:
    """Sign a user up through the API; the client keeps the session cookie"""
    payload = {
        "name": username.title(),
        "email": f"{username}@x.com",
        "username": username,
        "password": "secret123",
    }
    payload.update(overrides)
    response = await client.post("/api/users/signup", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_post(client: AsyncClient, user: dict, text: str = "hello", **extra) -> dict:
    payload = {"postedBy": user["id"], "text": text}
    payload.update(extra)
    response = await client.post("/api/posts", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["newPost"]


@pytest_asyncio.fixture
async def ann(make_client):
    """Client signed in as the freshly created user "ann", with the signup response"""
    client = await make_client()
    user = await signup(client, "ann")
    return client, user


@pytest_asyncio.fixture
async def bob(make_client):
    client = await make_client()
    user = await signup(client, "bob")
    return client, user
