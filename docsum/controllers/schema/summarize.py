"""Request and response schemas for POST /api/summarize. Wire names are camelCase."""

from pydantic import BaseModel, ConfigDict, Field

from docsum.services.summarization.models import SummaryResult


class SummarizeRequest(BaseModel):
    """JSON body for text mode. Carries the same fields as the multipart form, minus the file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source_type: str | None = Field(default="text", alias="sourceType")
    text: str | None = None
    style: str | None = None
    language: str | None = None


class MetricsResponse(BaseModel):
    """Token estimates and reduction ratio (2 decimals)."""

    model_config = ConfigDict(populate_by_name=True)

    original_tokens: int = Field(..., ge=0, alias="originalTokens")
    summary_tokens: int = Field(..., ge=0, alias="summaryTokens")
    reduction_ratio: float = Field(..., ge=0.0, le=1.0, alias="reductionRatio")


class SummarizeResponse(BaseModel):
    """POST /api/summarize success body."""

    summary: str = Field(..., description="Final merged summary")
    metrics: MetricsResponse

    @classmethod
    def from_result(cls, result: SummaryResult) -> "SummarizeResponse":
        m = result.metrics
        return cls(
            summary=result.summary,
            metrics=MetricsResponse(
                original_tokens=m.original_tokens,
                summary_tokens=m.summary_tokens,
                reduction_ratio=m.reduction_ratio,
            ),
        )


class ErrorResponse(BaseModel):
    """Error body for every failed request. `error` mirrors `detail` for clients reading that key."""

    error: str = Field(..., description="Human-readable message")
    detail: str = Field(..., description="Human-readable message")
    error_code: str | None = Field(default=None, description="Stable code, e.g. INVALID_DOCUMENT")
