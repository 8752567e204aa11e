"""
Chunker: splits normalized text into overlapping word windows sized to a token budget.
Documents whose estimate fits the budget pass through as a single chunk.
"""

from docsum.config.logging import get_logger
from docsum.services.chunking.tokenizer import estimate_tokens, words_for_token_budget

logger = get_logger(__name__)

DEFAULT_MAX_TOKENS = 2500
DEFAULT_OVERLAP_WORDS = 120


def split_into_chunks(
    text: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    overlap_words: int = DEFAULT_OVERLAP_WORDS,
) -> list[str]:
    """
    Slide a window of floor(max_tokens / 1.3) words over the text. Each next window
    starts `overlap` words before the end of the previous one. The walk stops after
    the window that reaches the last word. Overlap is clamped below the window size
    so the offset always advances.
    """
    words = text.split()
    if not words:
        return []
    size = words_for_token_budget(max_tokens)
    overlap = max(0, min(overlap_words, size - 1))
    if overlap != overlap_words:
        logger.warning(
            "Chunk overlap clamped to fit window",
            extra={"requested_overlap": overlap_words, "overlap": overlap, "words_per_chunk": size},
        )
    chunks: list[str] = []
    i = 0
    while i < len(words):
        end = min(len(words), i + size)
        chunks.append(" ".join(words[i:end]))
        if end >= len(words):
            break
        i = end - overlap
    return chunks


def chunk_document(
    text: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    overlap_words: int = DEFAULT_OVERLAP_WORDS,
    total_tokens: int | None = None,
) -> list[str]:
    """
    Return the ordered chunks for a normalized document. Always at least one chunk:
    when the token estimate is within max_tokens the whole text is the only chunk.
    """
    if total_tokens is None:
        total_tokens = estimate_tokens(text)
    if total_tokens <= max_tokens:
        return [text]
    chunks = split_into_chunks(text, max_tokens=max_tokens, overlap_words=overlap_words)
    logger.info(
        "Document split into chunks",
        extra={"total_tokens": total_tokens, "max_tokens": max_tokens, "chunks": len(chunks)},
    )
    return chunks or [text]
