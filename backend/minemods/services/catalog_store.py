"""Persistence for catalog entries.

A thin wrapper over one AsyncSession. Each method is a single statement
and commits on its own, so every write is atomic at the row level and
no transaction spans more than one record.
"""
from typing import Optional

from sqlalchemy import select, update, func, or_, asc, desc
from sqlalchemy.ext.asyncio import AsyncSession

from minemods.models.mod import Mod


class CatalogStore:
    """Reads and writes rows of the mods table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, mod: Mod) -> Mod:
        self.db.add(mod)
        await self.db.commit()
        await self.db.refresh(mod)
        return mod

    async def get_by_id(self, mod_id: str) -> Optional[Mod]:
        result = await self.db.execute(
            select(Mod)
            .where(Mod.id == mod_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Mod]:
        """Mods matching (name OR description contains search) AND category.

        Either filter may be omitted. Results are most-downloaded first;
        equal counts fall back to oldest first, then id.
        """
        query = select(Mod).execution_options(populate_existing=True)
        if search:
            query = query.where(
                or_(
                    Mod.name.contains(search, autoescape=True),
                    Mod.description.contains(search, autoescape=True),
                )
            )
        if category:
            query = query.where(Mod.category == category)
        query = query.order_by(desc(Mod.downloads), asc(Mod.created_at), asc(Mod.id))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def increment_downloads(self, mod_id: str) -> int:
        """Add one download in a single UPDATE. Returns rows affected."""
        result = await self.db.execute(
            update(Mod)
            .where(Mod.id == mod_id)
            .values(downloads=Mod.downloads + 1)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Mod))
        return result.scalar_one()

    async def distinct_categories(self) -> list[str]:
        result = await self.db.execute(
            select(Mod.category)
            .where(Mod.category.is_not(None), Mod.category != "")
            .distinct()
            .order_by(Mod.category)
        )
        return list(result.scalars().all())
