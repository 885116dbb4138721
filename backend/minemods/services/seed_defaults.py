"""Seed example mods on startup.

Idempotent: only inserts when the mods table is empty, so a catalog that
already has entries (including one emptied of seeds by hand) is left alone
on every later start.
"""
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from minemods.models.mod import Mod
from minemods.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# EXAMPLE MODS (3 rows)
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_MODS = [
    {
        "id": "1",
        "name": "OptiFine",
        "description": "Minecraft optimization mod. It allows Minecraft to run faster and look better.",
        "long_description": """# OptiFine

OptiFine is a Minecraft optimization mod. It allows Minecraft to run faster and look better with full support for HD textures and many configuration options.

## Features
- FPS boost
- Support for HD Textures
- Variable Render Distance
- Antialiasing
- Connected Textures""",
        "version": "1.20.1",
        "author": "sp614x",
        "category": "Optimization",
        "downloads": 1500000,
        "image_url": "https://picsum.photos/seed/optifine/800/400",
    },
    {
        "id": "2",
        "name": "JourneyMap",
        "description": "Real-time mapping in-game or in a web browser as you explore.",
        "long_description": """# JourneyMap

JourneyMap is a client-side mod for Minecraft which maps your world in real-time as you explore. You can view the map in-game using a minimap or full-screen, or even in a web browser.""",
        "version": "1.20.1",
        "author": "techbrew",
        "category": "Map",
        "downloads": 800000,
        "image_url": "https://picsum.photos/seed/journeymap/800/400",
    },
    {
        "id": "3",
        "name": "Just Enough Items (JEI)",
        "description": "JEI is an item and recipe viewing mod for Minecraft, built from the ground up for stability and performance.",
        "long_description": """# Just Enough Items (JEI)

JEI is an item and recipe viewing mod for Minecraft, built from the ground up for stability and performance.""",
        "version": "1.20.1",
        "author": "mezz",
        "category": "Utility",
        "downloads": 2500000,
        "image_url": "https://picsum.photos/seed/jei/800/400",
    },
]


async def seed_example_mods(db: AsyncSession) -> int:
    """Insert DEFAULT_MODS if the table is empty. Returns rows inserted."""
    store = CatalogStore(db)
    existing = await store.count()
    if existing:
        logger.info("Catalog already has %d mods, skipping seed", existing)
        return 0

    for m_def in DEFAULT_MODS:
        db.add(Mod(**m_def))
    await db.commit()
    logger.info("Seeded %d example mods", len(DEFAULT_MODS))
    return len(DEFAULT_MODS)


async def seed_all_defaults(db: AsyncSession):
    """Run all seed functions. Called from lifespan."""
    logger.info("Checking seed defaults...")
    await seed_example_mods(db)
    logger.info("Seed defaults check complete")
