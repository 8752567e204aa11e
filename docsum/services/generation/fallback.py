"""
Model fallback: try each model id in order until one returns non-empty text.

Only "model unavailable" failures (an explicit ModelUnavailableError, or an error whose
message says 404 / not found) and empty responses move on to the next candidate. Any
other error stops the trial and propagates unchanged.
"""

from collections.abc import Sequence

from docsum.config.logging import get_logger
from docsum.services.errors import GenerationExhaustedError, ModelUnavailableError
from docsum.services.generation.base import BaseGenerationStrategy

logger = get_logger(__name__)

NO_COMPATIBLE_MODEL_MESSAGE = "No compatible model for this credential."


def is_model_unavailable(exc: Exception) -> bool:
    """True when exc means the model id is not available to this credential."""
    if isinstance(exc, ModelUnavailableError):
        return True
    msg = str(exc)
    return "404" in msg or "not found" in msg.lower()


class ModelFallbackInvoker:
    """Sequential trial of model candidates against one generation strategy."""

    def __init__(self, strategy: BaseGenerationStrategy, candidates: Sequence[str]) -> None:
        if not candidates:
            raise ValueError("At least one model candidate is required")
        self._strategy = strategy
        self._candidates = tuple(candidates)

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    async def run(self, prompt: str) -> str:
        """Return the first non-empty, stripped generation. Raises GenerationExhaustedError if none."""
        last_error: Exception | None = None
        for name in self._candidates:
            try:
                text = await self._strategy.generate(name, prompt)
            except Exception as e:
                if not is_model_unavailable(e):
                    raise
                logger.warning("Model unavailable, trying next candidate", extra={"model": name, "error": str(e)})
                last_error = e
                continue
            if text and text.strip():
                logger.info("Using generation model", extra={"model": name, "strategy": self._strategy.strategy_name})
                return text.strip()
            logger.warning("Empty response, trying next candidate", extra={"model": name})
            last_error = ModelUnavailableError(f"Empty response from {name}")
        raise GenerationExhaustedError(NO_COMPATIBLE_MODEL_MESSAGE, cause=last_error) from last_error
