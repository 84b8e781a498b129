"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Record store
    store_backend: Literal["json", "sqlite"] = Field(
        default="json", description="Record store backend"
    )
    data_file: str = Field(
        default="./data/db.json", description="JSON document holding games, songs and clips"
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/mediashelf.db",
        description="SQLAlchemy URL used when store_backend=sqlite",
    )

    # Uploads
    storage_path: str = Field(default="./uploads", description="Local upload directory")

    # Pagination defaults
    games_page_size: int = Field(default=25, ge=1, description="Default games per page")
    songs_page_size: int = Field(default=24, ge=1, description="Default songs per page")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=4000, description="Bind port")

    # App
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool | None = Field(default=None, description="Debug mode (defaults based on environment)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # Sentry
    sentry_dsn: str = Field(default="", description="Sentry DSN for error tracking")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def debug_enabled(self) -> bool:
        """Get debug mode, defaulting based on environment if not explicitly set."""
        if self.debug is not None:
            return self.debug
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
