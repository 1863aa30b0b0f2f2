import os

# the app's engine is built at import time; keep it off any real server
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from todo_api.models import todo, user  # noqa: F401
from todo_api.database import Base, get_db
from todo_api.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def session_factory():
    # StaticPool keeps the single in-memory database alive across sessions
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def ann(client):
    res = await client.post("/api/users", json={"name": "Ann", "email": "ann@example.com"})
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def ben(client):
    res = await client.post("/api/users", json={"name": "Ben", "email": "ben@example.com"})
    assert res.status_code == 201
    return res.json()
