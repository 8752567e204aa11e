"""Google Gemini generation strategy (google-generativeai)."""

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from docsum.config.logging import get_logger
from docsum.config.settings import get_settings
from docsum.services.errors import ModelUnavailableError
from docsum.services.generation.base import BaseGenerationStrategy

logger = get_logger(__name__)


class GeminiGenerationStrategy(BaseGenerationStrategy):
    """
    Gemini via the google-generativeai SDK. API key from the constructor or
    settings.gemini_api_key. A model unknown to the credential raises
    ModelUnavailableError; a response with no readable text returns "".
    """

    def __init__(self, api_key: str | None = None, temperature: float = 0.2) -> None:
        api_key = api_key or get_settings().gemini_api_key or None
        if not api_key:
            raise ValueError("Gemini API key is required (set GEMINI_API_KEY)")
        genai.configure(api_key=api_key)
        self._temperature = temperature

    @property
    def strategy_name(self) -> str:
        return "gemini"

    async def generate(self, model: str, prompt: str) -> str:
        client = genai.GenerativeModel(
            model_name=model,
            generation_config={"temperature": self._temperature},
        )
        try:
            response = await client.generate_content_async(prompt)
        except google_exceptions.NotFound as e:
            raise ModelUnavailableError(f"Model {model} not found", cause=e) from e
        try:
            return response.text or ""
        except ValueError:
            # Raised by the SDK when the candidate has no text parts (e.g. blocked).
            finish_reason = "unknown"
            if response.candidates:
                finish_reason = response.candidates[0].finish_reason.name
            logger.warning("Empty Gemini response", extra={"model": model, "finish_reason": finish_reason})
            return ""
