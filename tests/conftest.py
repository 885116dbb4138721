"""Shared fixtures: a throwaway SQLite catalog and an HTTP client bound to it."""
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from minemods.config import Settings, get_settings
from minemods.database import get_db
from minemods.main import app
from minemods.models import Base, Mod
from minemods.services.catalog import CatalogService
from minemods.services.catalog_store import CatalogStore

ADMIN_PASSWORD = "correct-horse"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db):
    return CatalogStore(db)


@pytest.fixture
def catalog(store):
    return CatalogService(store, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite://",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
async def client(session_factory, test_settings):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_mod(mod_id, name, downloads=0, category="Utility", description=None, created_at=None):
    return Mod(
        id=mod_id,
        name=name,
        description=description if description is not None else f"{name} summary",
        version="1.0.0",
        author="tester",
        category=category,
        downloads=downloads,
        image_url=f"https://example.com/{mod_id}.png",
        created_at=created_at or datetime(2024, 1, 1, 12, 0, 0),
    )


@pytest.fixture
def mod_factory():
    return make_mod
