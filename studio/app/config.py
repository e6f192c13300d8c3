"""Application configuration using Pydantic Settings."""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment (and `.env`)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = Field("Studio Site")
    ENVIRONMENT: str = Field("development")
    DEBUG: bool = Field(False)
    API_PREFIX: str = Field("/api")
    LOG_LEVEL: str = Field("INFO")
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    # Public URL used to build share links for private albums
    PUBLIC_BASE_URL: str = Field("http://localhost:8000")

    # Storage. When the persistent volume directory exists (e.g. a mounted
    # disk on the hosting platform) uploads and the SQLite file live there.
    PERSISTENT_VOLUME_PATH: Optional[str] = Field(None)
    LOCAL_DATA_PATH: str = Field(".")
    DATABASE_URL: Optional[str] = Field(None)

    # Uploads
    MAX_UPLOAD_SIZE_MB: int = Field(10)
    MAX_UPLOAD_FILES: int = Field(50)

    # Private albums
    ACCESS_TOKEN_LENGTH: int = Field(8)

    @computed_field
    @property
    def DATA_DIR(self) -> str:
        if self.PERSISTENT_VOLUME_PATH and Path(self.PERSISTENT_VOLUME_PATH).is_dir():
            return self.PERSISTENT_VOLUME_PATH
        return self.LOCAL_DATA_PATH

    @computed_field
    @property
    def UPLOAD_DIR(self) -> str:
        return str(Path(self.DATA_DIR) / "uploads")

    @computed_field
    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{Path(self.DATA_DIR) / 'studio.db'}"

    @property
    def MAX_UPLOAD_SIZE_BYTES(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    return Settings()
