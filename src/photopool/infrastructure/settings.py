"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Photo Pool"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Photo pool
    upload_dir: Path = Path("./uploads")
    public_path: str = "/uploads"
    name_retry_budget: int = Field(default=5, ge=0)
    max_upload_mb: float = Field(default=10.0, gt=0)

    # Sidecar descriptions
    description_backend: Literal["json", "sqlite"] = "json"
    description_dir: Path = Path("./data/descriptions")
    sqlite_path: Path = Path("./data/descriptions.db")
    max_description_length: int = Field(default=1000, gt=0)

    # Listing
    default_page_limit: int = Field(default=10, gt=0)
    max_page_limit: int = Field(default=100, gt=0)

    @computed_field
    @property
    def max_upload_bytes(self) -> int:
        """Upload size ceiling in bytes."""
        return int(self.max_upload_mb * 1024 * 1024)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
