"""Text cleaners applied to extracted or pasted text before estimating and chunking."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace (spaces, tabs, newlines) to a single space
    and trim both ends. Idempotent.
    """
    if not text or not isinstance(text, str):
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()
