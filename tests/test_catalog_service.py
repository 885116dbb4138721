"""Tests for minemods.services.catalog: publish rules, filters, download accounting."""
import pytest

from minemods.errors import (
    ConfigurationError,
    ForbiddenError,
    ModNotFoundError,
    ModValidationError,
)
from minemods.schemas.mod import ModCreate
from minemods.services.catalog import SUGGESTED_CATEGORIES, CatalogService

from conftest import ADMIN_PASSWORD


def publish_form(**overrides):
    data = {
        "name": "Create",
        "description": "Mechanical contraptions",
        "long_description": "# Create\n\nGears.",
        "version": "0.5.1",
        "author": "simibubi",
        "category": "Tech",
        "admin_password": ADMIN_PASSWORD,
    }
    data.update(overrides)
    return ModCreate(**data)


class TestCatalogServiceConfig:

    def test_empty_password_rejected(self, store):
        with pytest.raises(ConfigurationError):
            CatalogService(store, admin_password="")


class TestCatalogServiceCreate:

    async def test_create_with_correct_password(self, catalog, store):
        mod_id = await catalog.create_mod(publish_form())
        mod = await store.get_by_id(mod_id)
        assert mod is not None
        assert mod.name == "Create"
        assert mod.downloads == 0
        assert mod.long_description.startswith("# Create")
        assert mod.image_url == f"https://picsum.photos/seed/{mod_id}/800/400"

    async def test_create_generates_fresh_ids(self, catalog):
        first = await catalog.create_mod(publish_form())
        second = await catalog.create_mod(publish_form())
        assert first != second

    async def test_explicit_image_kept(self, catalog, store):
        mod_id = await catalog.create_mod(publish_form(image_url="https://img.example/c.png"))
        mod = await store.get_by_id(mod_id)
        assert mod.image_url == "https://img.example/c.png"

    async def test_blank_image_gets_placeholder(self, store):
        catalog = CatalogService(
            store, admin_password=ADMIN_PASSWORD, image_placeholder="https://cdn.test/{id}.png"
        )
        mod_id = await catalog.create_mod(publish_form(image_url="   "))
        mod = await store.get_by_id(mod_id)
        assert mod.image_url == f"https://cdn.test/{mod_id}.png"

    async def test_wrong_password_never_writes(self, catalog, store):
        with pytest.raises(ForbiddenError):
            await catalog.create_mod(publish_form(admin_password="guess"))
        assert await store.count() == 0

    async def test_password_checked_before_fields(self, catalog, store):
        with pytest.raises(ForbiddenError):
            await catalog.create_mod(publish_form(name="", admin_password="guess"))
        assert await store.count() == 0

    async def test_missing_required_fields(self, catalog, store):
        with pytest.raises(ModValidationError) as exc_info:
            await catalog.create_mod(publish_form(name="  ", version=""))
        assert exc_info.value.missing == ["name", "version"]
        assert await store.count() == 0


class TestCatalogServiceRead:

    async def test_get_unknown_raises(self, catalog):
        with pytest.raises(ModNotFoundError):
            await catalog.get_mod("never-inserted")

    async def test_empty_filters_return_everything(self, catalog, store, mod_factory):
        await store.insert(mod_factory("a", "Alpha", downloads=10, category="Map"))
        await store.insert(mod_factory("b", "Beta", downloads=100, category="Utility"))
        mods = await catalog.list_mods(search="", category="")
        assert [m.id for m in mods] == ["b", "a"]

    async def test_category_is_not_trimmed(self, catalog, store, mod_factory):
        await store.insert(mod_factory("a", "Alpha", category="Map"))
        assert await catalog.list_mods(category="Map ") == []
        assert [m.id for m in await catalog.list_mods(category="Map")] == ["a"]

    async def test_whitespace_search_is_a_real_term(self, catalog, store, mod_factory):
        await store.insert(mod_factory("a", "Alpha", downloads=10, description="short"))
        await store.insert(mod_factory("b", "Beta Tools", downloads=5, description="tools"))
        assert [m.id for m in await catalog.list_mods(search=" ")] == ["b"]
        assert await catalog.list_mods(search="Alpha ") == []

    async def test_categories_suggested_then_extra(self, catalog, store, mod_factory):
        await store.insert(mod_factory("a", "Alpha", category="Map"))
        await store.insert(mod_factory("z", "Zed", category="Shaders"))
        await store.insert(mod_factory("y", "Why", category="Adventure"))
        assert await catalog.categories() == SUGGESTED_CATEGORIES + ["Adventure", "Shaders"]


class TestCatalogServiceDownloads:

    async def test_record_download_twice(self, catalog, store, mod_factory):
        await store.insert(mod_factory("a", "Alpha", downloads=10))
        assert await catalog.record_download("a") is True
        assert await catalog.record_download("a") is True
        assert (await catalog.get_mod("a")).downloads == 12

    async def test_record_download_unknown_is_permissive(self, catalog):
        assert await catalog.record_download("ghost") is False
