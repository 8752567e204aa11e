"""Shared fixtures: a scripted generation strategy and an HTTP client wired to it."""

from collections.abc import Callable
from typing import Union

import pytest
from fastapi.testclient import TestClient

from docsum.config.settings import get_settings
from docsum.config.summarization.models import SummarizerConfig
from docsum.config.summarization.static import get_summarizer_config
from docsum.controllers.routes.summarize import get_model_invoker
from docsum.main import app
from docsum.services.generation.base import BaseGenerationStrategy
from docsum.services.generation.fallback import ModelFallbackInvoker

Outcome = Union[str, Exception, Callable[[str], str]]


class ScriptedStrategy(BaseGenerationStrategy):
    """
    Fake generation client. Each model id maps to a fixed text, an exception to raise,
    or a callable of the prompt. Every call is recorded as (model, prompt).
    """

    def __init__(self, outcomes: dict[str, Outcome] | None = None, default: Outcome = "A short summary.") -> None:
        self.outcomes = outcomes or {}
        self.default = default
        self.calls: list[tuple[str, str]] = []

    @property
    def strategy_name(self) -> str:
        return "scripted"

    @property
    def models_called(self) -> list[str]:
        return [model for model, _ in self.calls]

    async def generate(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        outcome = self.outcomes.get(model, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(prompt)
        return outcome


@pytest.fixture
def scripted_strategy() -> ScriptedStrategy:
    return ScriptedStrategy()


@pytest.fixture
def summarizer_config(tmp_path) -> SummarizerConfig:
    return SummarizerConfig(
        model_candidates=("model-a", "model-b", "model-c"),
        generation_provider="mock",
        max_chunk_tokens=2500,
        overlap_words=120,
        min_document_chars=30,
        max_upload_bytes=20 * 1024 * 1024,
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def invoker(scripted_strategy, summarizer_config) -> ModelFallbackInvoker:
    return ModelFallbackInvoker(scripted_strategy, summarizer_config.model_candidates)


@pytest.fixture
def client(summarizer_config, invoker):
    """TestClient without lifespan; config and invoker are injected through dependency overrides."""
    app.dependency_overrides[get_summarizer_config] = lambda: summarizer_config
    app.dependency_overrides[get_model_invoker] = lambda: invoker
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_caches():
    """Clear cached settings/config/invoker before and after a test that changes the environment."""

    def _clear() -> None:
        get_settings.cache_clear()
        get_summarizer_config.cache_clear()
        get_model_invoker.cache_clear()

    _clear()
    yield
    _clear()
