"""Per-request summarization records. Created for one request and discarded with the response."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SourceKind = Literal["text", "file"]


class Document(BaseModel):
    """Raw input text and where it came from."""

    model_config = ConfigDict(frozen=True)

    raw_text: str = Field(default="")
    source_kind: SourceKind = Field(default="text")
    filename: str | None = Field(default=None, description="Original filename (file mode only)")


class SummaryMetrics(BaseModel):
    """Token estimates before and after, and the clamped reduction ratio."""

    original_tokens: int = Field(..., ge=0)
    summary_tokens: int = Field(..., ge=0)
    reduction_ratio: float = Field(..., ge=0.0, le=1.0)


class SummaryResult(BaseModel):
    summary: str
    metrics: SummaryMetrics
    chunk_count: int = Field(..., ge=1)
