"""Catalog operations: browse, publish, and download accounting.

The service holds no state of its own. It is built per request around a
CatalogStore and the configured admin password.
"""
import hmac
import logging
import uuid
from typing import Optional

from minemods.errors import (
    ConfigurationError,
    ForbiddenError,
    ModNotFoundError,
    ModValidationError,
)
from minemods.models.mod import Mod
from minemods.schemas.mod import ModCreate
from minemods.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

# Offered by the publish form; the server accepts any category string.
SUGGESTED_CATEGORIES = ["Optimization", "Map", "Utility", "World Gen", "Magic", "Tech"]

REQUIRED_FIELDS = ("name", "description", "version")

DEFAULT_IMAGE_PLACEHOLDER = "https://picsum.photos/seed/{id}/800/400"


class CatalogService:

    def __init__(
        self,
        store: CatalogStore,
        admin_password: str,
        image_placeholder: str = DEFAULT_IMAGE_PLACEHOLDER,
    ):
        if not admin_password:
            raise ConfigurationError("ADMIN_PASSWORD is not configured")
        self.store = store
        self._admin_password = admin_password
        self.image_placeholder = image_placeholder

    async def list_mods(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Mod]:
        """Filter by substring search and exact category; empty means no filter."""
        return await self.store.list_filtered(search=search or None, category=category or None)

    async def get_mod(self, mod_id: str) -> Mod:
        mod = await self.store.get_by_id(mod_id)
        if mod is None:
            raise ModNotFoundError(mod_id)
        return mod

    async def create_mod(self, body: ModCreate) -> str:
        """Publish a new mod and return its generated id.

        The password is checked before anything else; a mismatch never
        reaches the store.
        """
        if not self.check_password(body.admin_password):
            logger.warning("Rejected publish of %r: incorrect admin password", body.name)
            raise ForbiddenError("Incorrect admin password")

        missing = [f for f in REQUIRED_FIELDS if not getattr(body, f).strip()]
        if missing:
            raise ModValidationError(missing)

        mod_id = str(uuid.uuid4())
        mod = Mod(
            id=mod_id,
            name=body.name.strip(),
            description=body.description.strip(),
            long_description=body.long_description,
            version=body.version.strip(),
            author=body.author.strip(),
            category=body.category.strip(),
            downloads=0,
            image_url=(body.image_url or "").strip() or self.placeholder_image(mod_id),
        )
        await self.store.insert(mod)
        logger.info("Published mod %s (%s)", mod_id, mod.name)
        return mod_id

    async def record_download(self, mod_id: str) -> bool:
        """Count one download. Unknown ids are accepted and only logged."""
        touched = await self.store.increment_downloads(mod_id)
        if not touched:
            logger.warning("Download recorded for unknown mod %s", mod_id)
        return touched > 0

    async def categories(self) -> list[str]:
        stored = await self.store.distinct_categories()
        extra = sorted(c for c in stored if c not in SUGGESTED_CATEGORIES)
        return SUGGESTED_CATEGORIES + extra

    def check_password(self, candidate: str) -> bool:
        return hmac.compare_digest(
            (candidate or "").encode("utf-8"), self._admin_password.encode("utf-8")
        )

    def placeholder_image(self, mod_id: str) -> str:
        return self.image_placeholder.format(id=mod_id)
