"""Pytest configuration and shared fixtures."""

import os
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Test environment, set before app modules read settings
os.environ.setdefault("API_TITLE", "Study Portal Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")
os.environ.setdefault("DEBUG", "False")
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("RUN_MIGRATIONS", "False")
os.environ.setdefault("SEED_DEFAULTS", "False")

import app.models  # noqa: E402,F401
from app.application import create_app  # noqa: E402
from app.services.seeder import SemesterSeeder  # noqa: E402
from app.storage.database import DatabaseRecordStore  # noqa: E402
from app.storage.local import LocalFallbackStore, LocalRecordStore  # noqa: E402
from app.storage.manager import get_record_store  # noqa: E402
from app.utils.db import Base  # noqa: E402


@pytest.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """Session factory over a fresh SQLite database file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def database_store(session_factory) -> DatabaseRecordStore:
    """Remote record store backed by the test database."""
    return DatabaseRecordStore(session_factory)


@pytest.fixture
def fallback(tmp_path) -> LocalFallbackStore:
    """Key-value fallback store in a temporary directory."""
    return LocalFallbackStore(tmp_path / "local")


@pytest.fixture
def local_store(fallback) -> LocalRecordStore:
    """Local record store over the temporary fallback."""
    return LocalRecordStore(fallback)


@pytest.fixture(params=["remote", "local"])
def store(request):
    """Each record store backend in turn."""
    if request.param == "remote":
        return request.getfixturevalue("database_store")
    return request.getfixturevalue("local_store")


@pytest.fixture
def seeder() -> SemesterSeeder:
    """Fresh seeder with its own lock."""
    return SemesterSeeder()


@pytest.fixture
def app(store) -> FastAPI:
    """FastAPI application bound to the parametrized store."""
    application = create_app()
    application.dependency_overrides[get_record_store] = lambda: store
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async test client without lifespan (store is injected directly)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
