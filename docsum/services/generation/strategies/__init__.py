"""Generation strategy implementations."""

from docsum.config.summarization.models import SummarizerConfig
from docsum.services.generation.base import BaseGenerationStrategy
from docsum.services.generation.strategies.gemini_strategy import GeminiGenerationStrategy
from docsum.services.generation.strategies.mock_strategy import MockGenerationStrategy

STRATEGY_REGISTRY: dict[str, type[BaseGenerationStrategy]] = {
    "gemini": GeminiGenerationStrategy,
    "mock": MockGenerationStrategy,
}


def get_generation_strategy(config: SummarizerConfig) -> BaseGenerationStrategy | None:
    """Return an instance of the configured generation strategy, or None if the name is unknown."""
    cls = STRATEGY_REGISTRY.get(config.generation_provider)
    if cls is None:
        return None
    if cls is GeminiGenerationStrategy:
        return GeminiGenerationStrategy(temperature=config.temperature)
    return cls()
