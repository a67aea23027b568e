"""Centralized configuration for doc-frontmatter.

Every value can be overridden through a ``DOC_FRONTMATTER_*`` environment
variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Settings for reading and validating frontmatter."""

    # === Reading ===
    read_chunk_size: int = Field(default=64 * 1024, description="Characters requested per streamed read")
    end_delimiter: str = Field(default="\n---\n", description="Marker that terminates a frontmatter block")
    full_read_suffix: str = Field(
        default="index.md", description="Documents with this filename suffix are always read in full"
    )

    # === Localization ===
    default_language: str = Field(default="en", description="Language code that never gets substitutions")

    # === Batch scanning ===
    max_concurrency: int = Field(default=32, description="Maximum documents read at the same time")
    document_pattern: str = Field(default="*.md", description="Glob used when scanning a document tree")

    # === Logging Configuration ===
    log_level: str = Field(default="INFO", description="Logging level")
    structured_logging: bool = Field(default=True, description="Emit JSON log records")
    log_file: str | None = Field(default=None, description="Rotating log file; stderr when unset")

    model_config = SettingsConfigDict(
        env_prefix="DOC_FRONTMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("read_chunk_size", "max_concurrency")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("end_delimiter")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def log_file_path(self) -> Path | None:
        """Get the log file as a Path object, if one is configured."""
        return Path(self.log_file).resolve() if self.log_file else None


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset the global settings instance (primarily for testing)."""
    global _settings
    _settings = None
