"""Summarization configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SummaryStyle = Literal["concise", "detailed", "bullets"]

SUMMARY_STYLES: tuple[str, ...] = ("concise", "detailed", "bullets")
DEFAULT_STYLE: SummaryStyle = "concise"
DEFAULT_LANGUAGE = "English"


class SummaryOptions(BaseModel):
    """Per-request style and output language. Unknown styles fall back to concise."""

    model_config = ConfigDict(frozen=True)

    style: SummaryStyle = Field(default=DEFAULT_STYLE)
    language: str = Field(default=DEFAULT_LANGUAGE)

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, value: object) -> object:
        if isinstance(value, str) and value in SUMMARY_STYLES:
            return value
        return DEFAULT_STYLE

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: object) -> object:
        if not isinstance(value, str) or not value.strip():
            return DEFAULT_LANGUAGE
        return value.strip()


class SummarizerConfig(BaseModel):
    """Process-wide summarizer configuration, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_candidates: tuple[str, ...] = Field(..., min_length=1, description="Model ids in trial order")
    generation_provider: str = Field(default="gemini", description="gemini|mock")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    max_chunk_tokens: int = Field(default=2500, ge=1, description="Estimated-token threshold and chunk budget")
    overlap_words: int = Field(default=120, ge=0, description="Words shared by consecutive chunks")
    min_document_chars: int = Field(default=30, ge=1)
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, ge=1)
    upload_dir: str = Field(default="uploads")
