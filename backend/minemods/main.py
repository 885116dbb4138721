"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from minemods.config import settings
from minemods.database import engine, get_db
from minemods.errors import ConfigurationError
from minemods.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check config, create tables, seed example mods."""
    if not settings.ADMIN_PASSWORD:
        logger.error("ADMIN_PASSWORD is not set; refusing to start")
        raise ConfigurationError("ADMIN_PASSWORD must be set")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SEED_ON_STARTUP:
        from minemods.services.seed_defaults import seed_all_defaults
        from minemods.database import async_session
        async with async_session() as session:
            await seed_all_defaults(session)

    yield

    # Cleanup
    await engine.dispose()


app = FastAPI(
    title="MineMods API",
    version="1.0.0",
    description="Catalog of community Minecraft mods.",
    lifespan=lifespan,
)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Verify API and database connectivity."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception as e:
        return {"status": "error", "database": str(e)}


def mount_frontend(app: FastAPI, dist_path: str) -> bool:
    """Serve a built single-page app from `dist_path`.

    Existing files are returned as-is; any other non-API path gets
    index.html so client-side routes survive a reload. Must be called
    after the API routers are included.
    """
    dist = Path(dist_path).resolve()
    index = dist / "index.html"
    if not index.is_file():
        logger.warning("Frontend dist %s has no index.html, not serving it", dist)
        return False

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa(full_path: str):
        if full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not Found")
        candidate = (dist / full_path).resolve()
        if candidate.is_file() and candidate.is_relative_to(dist):
            return FileResponse(candidate)
        return FileResponse(index)

    logger.info("Serving frontend from %s", dist)
    return True


# Register routers
from minemods.routes.mods import router as mods_router
from minemods.routes.categories import router as categories_router
app.include_router(mods_router)
app.include_router(categories_router)

if settings.FRONTEND_DIST_PATH:
    mount_frontend(app, settings.FRONTEND_DIST_PATH)
