"""Mods API routes."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from minemods.config import Settings, get_settings
from minemods.database import get_db
from minemods.errors import ForbiddenError, ModNotFoundError, ModValidationError
from minemods.models.mod import Mod
from minemods.schemas.mod import DownloadRecorded, ModCreate, ModCreated, ModResponse
from minemods.services.catalog import CatalogService
from minemods.services.catalog_store import CatalogStore

router = APIRouter(prefix="/api/mods", tags=["mods"])


def get_catalog(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    """Build a CatalogService around the request's session."""
    return CatalogService(
        CatalogStore(db),
        admin_password=settings.ADMIN_PASSWORD,
        image_placeholder=settings.IMAGE_PLACEHOLDER_URL,
    )


@router.get("", response_model=list[ModResponse])
async def list_mods(
    search: Optional[str] = Query(None, description="Substring of name or description"),
    category: Optional[str] = Query(None, description="Exact category"),
    catalog: CatalogService = Depends(get_catalog),
):
    """List mods, most downloaded first."""
    mods = await catalog.list_mods(search=search, category=category)
    return [_to_response(m) for m in mods]


@router.get("/{mod_id}", response_model=ModResponse)
async def get_mod(
    mod_id: str,
    catalog: CatalogService = Depends(get_catalog),
):
    """Get a single mod by ID."""
    try:
        mod = await catalog.get_mod(mod_id)
    except ModNotFoundError:
        raise HTTPException(status_code=404, detail="Mod not found")
    return _to_response(mod)


@router.post("", response_model=ModCreated, status_code=201)
async def create_mod(
    body: ModCreate,
    catalog: CatalogService = Depends(get_catalog),
):
    """Publish a new mod. Requires the admin password."""
    try:
        mod_id = await catalog.create_mod(body)
    except ForbiddenError:
        raise HTTPException(status_code=403, detail="Incorrect admin password")
    except ModValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"id": mod_id}


@router.post("/{mod_id}/download", response_model=DownloadRecorded)
async def record_download(
    mod_id: str,
    catalog: CatalogService = Depends(get_catalog),
):
    """Count a download. Unknown IDs still report success."""
    await catalog.record_download(mod_id)
    return {"success": True}


def _to_response(mod: Mod) -> dict:
    """Convert SQLAlchemy model to response dict."""
    return {
        "id": mod.id,
        "name": mod.name,
        "description": mod.description,
        "long_description": mod.long_description,
        "version": mod.version,
        "author": mod.author,
        "category": mod.category,
        "downloads": mod.downloads,
        "image_url": mod.image_url,
        "created_at": mod.created_at,
    }
