"""POST /api/summarize: summarize pasted text or an uploaded PDF/DOCX/TXT file."""

from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from pydantic import ValidationError

from docsum.config.summarization.models import SummarizerConfig, SummaryOptions
from docsum.config.summarization.static import get_summarizer_config
from docsum.controllers.schema.summarize import ErrorResponse, SummarizeRequest, SummarizeResponse
from docsum.services.errors import DocumentValidationError
from docsum.services.generation.fallback import ModelFallbackInvoker
from docsum.services.generation.strategies import get_generation_strategy
from docsum.services.summarization.documents import load_document
from docsum.services.summarization.pipeline import run_summarize_pipeline

router = APIRouter(prefix="/api", tags=["summarization"])


@lru_cache
def get_model_invoker() -> ModelFallbackInvoker:
    """Shared invoker built from the process config. Raises ValueError on an unknown provider."""
    config = get_summarizer_config()
    strategy = get_generation_strategy(config)
    if strategy is None:
        raise ValueError(f"Unknown generation provider: {config.generation_provider!r}")
    return ModelFallbackInvoker(strategy, config.model_candidates)


def _is_json(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


async def _read_json_body(request: Request) -> SummarizeRequest:
    try:
        payload = await request.json()
    except ValueError as e:
        raise DocumentValidationError("Request body is not valid JSON", cause=e) from e
    if not isinstance(payload, dict):
        raise DocumentValidationError("Request body must be a JSON object")
    try:
        return SummarizeRequest.model_validate(payload)
    except ValidationError as e:
        raise DocumentValidationError("Invalid request body", cause=e) from e


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def summarize(
    request: Request,
    config: Annotated[SummarizerConfig, Depends(get_summarizer_config)],
    invoker: Annotated[ModelFallbackInvoker, Depends(get_model_invoker)],
    source_type: Annotated[str, Form(alias="sourceType")] = "text",
    text: Annotated[str | None, Form()] = None,
    style: Annotated[str | None, Form()] = None,
    language: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File()] = None,
) -> SummarizeResponse:
    """
    Summarize a document given as text (sourceType=text) or as a file (sourceType=file).
    Accepts a multipart/urlencoded form, or a JSON object with the same fields for text mode.
    Long documents are chunked, summarized chunk by chunk, then merged.
    Errors are rendered by the app-level SummarizerError handler.
    """
    if _is_json(request):
        body = await _read_json_body(request)
        source_type, text, style, language = body.source_type, body.text, body.style, body.language
        file = None
    options = SummaryOptions(style=style, language=language)
    document = await load_document(source_type, text, file, config)
    result = await run_summarize_pipeline(document, options, config, invoker)
    return SummarizeResponse.from_result(result)
