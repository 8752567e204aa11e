"""Static summarizer config loader. Read-only; no business logic."""

import json
from functools import lru_cache
from pathlib import Path

from docsum.config.settings import Settings, get_settings
from docsum.config.summarization.models import SummarizerConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached_candidates: tuple[str, ...] | None = None


def load_model_candidates() -> tuple[str, ...]:
    """Load the fixed, descending model candidate list from static.json."""
    global _cached_candidates
    if _cached_candidates is not None:
        return _cached_candidates
    data = json.loads(_config_path.read_text(encoding="utf-8"))
    _cached_candidates = tuple(str(m) for m in data.get("model_candidates", []) if m)
    return _cached_candidates


def resolve_model_candidates(override: str | None = None) -> tuple[str, ...]:
    """
    Return the trial order: the operator override (if any) first, then the static list.
    Blank entries are dropped and repeats keep their first position.
    """
    ordered: list[str] = []
    for name in (override, *load_model_candidates()):
        name = (name or "").strip()
        if name and name not in ordered:
            ordered.append(name)
    return tuple(ordered)


def build_summarizer_config(settings: Settings) -> SummarizerConfig:
    """Build the immutable summarizer config from settings plus static.json."""
    return SummarizerConfig(
        model_candidates=resolve_model_candidates(settings.model),
        generation_provider=settings.generation_provider,
        temperature=settings.generation_temperature,
        max_chunk_tokens=settings.max_chunk_tokens,
        overlap_words=settings.chunk_overlap_words,
        min_document_chars=settings.min_document_chars,
        max_upload_bytes=settings.max_upload_bytes,
        upload_dir=settings.upload_dir,
    )


@lru_cache
def get_summarizer_config() -> SummarizerConfig:
    """Return the cached summarizer config for the app lifetime."""
    return build_summarizer_config(get_settings())
