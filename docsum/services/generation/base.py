"""Base generation strategy and contract."""

from abc import ABC, abstractmethod


class BaseGenerationStrategy(ABC):
    """
    Abstract text generation client. One call per (model, prompt); no retries here.
    Returning an empty string is valid and means the model produced nothing usable.
    """

    @abstractmethod
    async def generate(self, model: str, prompt: str) -> str:
        """Run prompt against model and return the generated text."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'gemini', 'mock'."""
        ...
