"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All config comes from env vars or .env.backend file."""

    DATABASE_URL: str = "sqlite+aiosqlite:///./minemods.db"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    CORS_ORIGINS: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Shared secret for the publish form. No default: startup fails when unset.
    ADMIN_PASSWORD: str = ""

    # "{id}" is replaced with the generated mod id
    IMAGE_PLACEHOLDER_URL: str = "https://picsum.photos/seed/{id}/800/400"
    SEED_ON_STARTUP: bool = True

    # Built single-page app to serve alongside the API (empty = API only)
    FRONTEND_DIST_PATH: str = ""

    class Config:
        env_file = ".env.backend"
        env_file_encoding = "utf-8"


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process settings."""
    return settings
