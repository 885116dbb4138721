"""Catalog domain errors. Routes map each one to its HTTP status."""


class CatalogError(Exception):
    """Base class for catalog failures scoped to a single request."""


class ModNotFoundError(CatalogError):
    def __init__(self, mod_id: str):
        super().__init__(f"Mod not found: {mod_id}")
        self.mod_id = mod_id


class ForbiddenError(CatalogError):
    """Publish attempted with the wrong admin password."""


class ModValidationError(CatalogError):
    def __init__(self, missing: list[str]):
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing


class ConfigurationError(CatalogError):
    """Raised at startup when required settings are absent."""
