"""Prompt construction for chunk summaries and the final merge. Pure functions."""

from collections.abc import Sequence

from docsum.config.summarization.models import DEFAULT_LANGUAGE, DEFAULT_STYLE

STYLE_FORMS: dict[str, str] = {
    "concise": "Write a short 3-5 sentence summary.",
    "detailed": "Write a clear summary in 2-4 short paragraphs.",
    "bullets": "Write 5-8 bullet points. Each bullet must be crisp and factual.",
}

MERGE_INSTRUCTION = "Combine these parts into ONE clear summary:"


def build_prompt(style: str = DEFAULT_STYLE, language: str = DEFAULT_LANGUAGE) -> str:
    """Instruction block: output language, form for the style, and fixed rules."""
    form = STYLE_FORMS.get(style, STYLE_FORMS[DEFAULT_STYLE])
    return (
        "You summarize documents for busy readers.\n"
        f"Output language: {language}\n"
        f"Form: {form}\n"
        "Rules:\n"
        "- Keep important facts, names, numbers, and dates.\n"
        "- Be neutral and precise.\n"
        "- Return only the summary."
    )


def build_chunk_prompt(chunk: str, style: str = DEFAULT_STYLE, language: str = DEFAULT_LANGUAGE) -> str:
    return f"{build_prompt(style, language)}\n\nTEXT:\n{chunk}"


def build_merge_prompt(
    summaries: Sequence[str],
    style: str = DEFAULT_STYLE,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Label parts "Part 1:", "Part 2:", ... in the given order and ask for one combined summary."""
    joined = "\n\n".join(f"Part {i}:\n{s}" for i, s in enumerate(summaries, start=1))
    return f"{build_prompt(style, language)}\n\n{MERGE_INSTRUCTION}\n\n{joined}"
