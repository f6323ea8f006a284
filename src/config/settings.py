"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: Literal["sqlite", "memory"] = "sqlite"
    data_dir: Path = Path("data")
    db_name: str = "pos.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    # Legacy flat-file seed documents (products.json, stock.json, sales.json)
    seed_dir: Path = Path("seed")
    seed_on_start: bool = True

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class SalesSettings(BaseSettings):
    """Sale recording policies."""

    model_config = SettingsConfigDict(env_prefix="SALES_")

    unknown_items: Literal["skip", "reject"] = "skip"
    allow_negative_stock: bool = True
    strict_item_values: bool = False  # quantity > 0 and price >= 0

    # Reload-and-reapply attempts after an optimistic version conflict
    commit_retries: int = 3


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias=AliasChoices("API_PORT", "PORT"))
    debug: bool = False
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Static content
    public_dir: Path = Path("public")
    assets_dir: Path = Path("assets")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "POS Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    sales: SalesSettings = Field(default_factory=SalesSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        if settings.backend == "sqlite":
            settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
