"""Approximate token counting. Word count times a fixed factor; chunk budgets are calibrated to it."""

import math

TOKENS_PER_WORD = 1.3


def count_words(text: str) -> int:
    """Number of whitespace-delimited words."""
    if not text:
        return 0
    return len(text.split())


def estimate_tokens(text: str) -> int:
    """Return ceil(words * 1.3). Empty or whitespace-only text is 0."""
    words = count_words(text)
    if words == 0:
        return 0
    return math.ceil(words * TOKENS_PER_WORD)


def words_for_token_budget(max_tokens: int) -> int:
    """Largest word count whose estimate fits max_tokens. Never below 1."""
    return max(1, math.floor(max_tokens / TOKENS_PER_WORD))
