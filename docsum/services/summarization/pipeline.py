"""
Summarization pipeline: normalize → validate length → estimate → chunk →
summarize each chunk in order → merge → metrics.

Chunks are summarized one at a time; chunk N+1 is sent only after chunk N returns.
Any stage failure aborts the request.
"""

import time
from collections.abc import Sequence

from docsum.config.logging import get_logger
from docsum.config.summarization.models import SummarizerConfig, SummaryOptions
from docsum.services.chunking.chunker import chunk_document
from docsum.services.chunking.cleaners import normalize_whitespace
from docsum.services.chunking.tokenizer import estimate_tokens
from docsum.services.errors import DocumentValidationError, GenerationError, SummarizerError
from docsum.services.generation.fallback import ModelFallbackInvoker
from docsum.services.summarization.models import Document, SummaryMetrics, SummaryResult
from docsum.services.summarization.prompts import build_chunk_prompt, build_merge_prompt

logger = get_logger(__name__)

TOO_SHORT_MESSAGE = "Document is empty or too short to summarize"


async def summarize_chunk(chunk: str, options: SummaryOptions, invoker: ModelFallbackInvoker) -> str:
    """Summarize one chunk with the style/language instructions."""
    return await invoker.run(build_chunk_prompt(chunk, options.style, options.language))


async def merge_summaries(
    summaries: Sequence[str],
    options: SummaryOptions,
    invoker: ModelFallbackInvoker,
) -> str:
    """
    Combine partial summaries in chunk order. A single summary is returned as is,
    without another generation call.
    """
    if not summaries:
        raise ValueError("Nothing to merge")
    if len(summaries) == 1:
        return summaries[0]
    return await invoker.run(build_merge_prompt(summaries, options.style, options.language))


def compute_metrics(original_tokens: int, summary: str) -> SummaryMetrics:
    """reduction_ratio = max(0, 1 - summary/original), rounded to 2 decimals."""
    summary_tokens = estimate_tokens(summary)
    ratio = 0.0
    if original_tokens > 0:
        ratio = max(0.0, 1 - summary_tokens / original_tokens)
    return SummaryMetrics(
        original_tokens=original_tokens,
        summary_tokens=summary_tokens,
        reduction_ratio=round(ratio, 2),
    )


async def run_summarize_pipeline(
    document: Document,
    options: SummaryOptions,
    config: SummarizerConfig,
    invoker: ModelFallbackInvoker,
) -> SummaryResult:
    """
    Summarize a loaded document. Raises DocumentValidationError when the normalized
    text is shorter than config.min_document_chars, GenerationExhaustedError when no
    model candidate produced text, and GenerationError for any other generation failure.
    """
    started = time.perf_counter()
    text = normalize_whitespace(document.raw_text)
    if len(text) < config.min_document_chars:
        raise DocumentValidationError(TOO_SHORT_MESSAGE)

    total_tokens = estimate_tokens(text)
    chunks = chunk_document(
        text,
        max_tokens=config.max_chunk_tokens,
        overlap_words=config.overlap_words,
        total_tokens=total_tokens,
    )
    logger.info(
        "Summarizing document",
        extra={
            "source_kind": document.source_kind,
            "document_name": document.filename,
            "total_tokens": total_tokens,
            "chunks": len(chunks),
            "style": options.style,
        },
    )

    try:
        partials: list[str] = []
        for index, chunk in enumerate(chunks):
            partials.append(await summarize_chunk(chunk, options, invoker))
            logger.debug("Chunk summarized", extra={"chunk_index": index})
        summary = await merge_summaries(partials, options, invoker)
    except SummarizerError:
        raise
    except Exception as e:
        logger.warning("Generation failed", extra={"error_type": type(e).__name__, "error": str(e)})
        raise GenerationError(str(e) or "Summarization failed", cause=e) from e

    metrics = compute_metrics(total_tokens, summary)
    logger.info(
        "Summary ready",
        extra={
            "original_tokens": metrics.original_tokens,
            "summary_tokens": metrics.summary_tokens,
            "reduction_ratio": metrics.reduction_ratio,
            "elapsed_ms": round((time.perf_counter() - started) * 1000),
        },
    )
    return SummaryResult(summary=summary, metrics=metrics, chunk_count=len(chunks))
