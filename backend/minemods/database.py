"""Async SQLAlchemy engine and session factory for the mods catalog.

Routes receive a session through `get_db` and wrap it in a CatalogStore:
    catalog = CatalogService(CatalogStore(db), admin_password=...)

SQLite (aiosqlite) is the default single-file store; a postgresql+asyncpg
URL in DATABASE_URL switches to a pooled server database.
"""
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from minemods.config import settings


def _engine_options(url: str) -> dict:
    """Pool sizing only applies to server databases; SQLite uses its own pool."""
    if url.startswith("sqlite"):
        return {"connect_args": {"timeout": 30}}
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True}


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    **_engine_options(settings.DATABASE_URL),
)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """FastAPI dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
