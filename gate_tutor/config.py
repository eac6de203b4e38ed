"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "GATE Tutor"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    # Left unset on purpose: startup logs the problem and store calls fail with 500
    database_url: str | None = None

    @computed_field
    @property
    def database_url_async(self) -> str | None:
        """Get async database URL, rewriting plain Postgres schemes for asyncpg."""
        if not self.database_url:
            return None
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+asyncpg://", 1)
        # asyncpg doesn't accept libpq query params (sslmode etc.) via URL
        if url.startswith("postgresql+asyncpg://") and "?" in url:
            url = url.split("?")[0]
        return url

    @computed_field
    @property
    def database_requires_ssl(self) -> bool:
        """Check if the database connection requires SSL (for Neon, Supabase, etc.)."""
        if self.database_url:
            return "sslmode=require" in self.database_url or "ssl=require" in self.database_url
        return False

    @computed_field
    @property
    def database_url_sync(self) -> str | None:
        """Get sync database URL (for Alembic)."""
        if not self.database_url:
            return None
        url = self.database_url
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        elif url.startswith("postgresql+asyncpg://"):
            url = url.replace("postgresql+asyncpg://", "postgresql://", 1)
        elif url.startswith("sqlite+aiosqlite://"):
            url = url.replace("sqlite+aiosqlite://", "sqlite://", 1)
        return url

    # Gemini (Google Generative Language API)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 60.0

    # CORS
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def mask_database_url(url: str) -> str:
    """Hide the password part of a connection URL so it can be logged."""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable database URL>"
