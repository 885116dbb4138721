"""Categories API routes."""
from fastapi import APIRouter, Depends

from minemods.routes.mods import get_catalog
from minemods.services.catalog import CatalogService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[str])
async def list_categories(catalog: CatalogService = Depends(get_catalog)):
    """Suggested categories first, then any others already in use."""
    return await catalog.categories()
