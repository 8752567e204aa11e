"""Mock generation strategy for local runs and tests. No network."""

from docsum.services.generation.base import BaseGenerationStrategy

MOCK_SUMMARY_WORDS = 40
_TEXT_LABEL = "TEXT:"


class MockGenerationStrategy(BaseGenerationStrategy):
    """
    Deterministic fake summaries: the leading words of the prompt's last section
    (the document text or the parts to merge). Same prompt -> same output.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    async def generate(self, model: str, prompt: str) -> str:
        body = prompt.rsplit("\n\n", 1)[-1]
        if body.startswith(_TEXT_LABEL):
            body = body[len(_TEXT_LABEL):]
        return " ".join(body.split()[:MOCK_SUMMARY_WORDS])
