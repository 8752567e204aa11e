"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    app_name: str = Field(default="docsum", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=5000, ge=1, le=65535, description="Listen port")

    # Generation (see config/summarization for the candidate list)
    gemini_api_key: str = Field(default="", description="Gemini API key; required for the gemini provider")
    model: str | None = Field(default=None, description="Override model id, tried before the static candidates")
    generation_provider: Literal["gemini", "mock"] = Field(
        default="gemini", description="Generation strategy name"
    )
    generation_temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Sampling temperature")

    # Chunking
    max_chunk_tokens: int = Field(default=2500, ge=1, description="Estimated-token budget per chunk")
    chunk_overlap_words: int = Field(default=120, ge=0, description="Words shared by consecutive chunks")
    min_document_chars: int = Field(default=30, ge=1, description="Shortest normalized document accepted")

    # Uploads
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, ge=1, description="Upload size limit (bytes)")
    upload_dir: str = Field(default="uploads", description="Directory for transient uploaded files")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
