"""Plain-text extraction."""

from pathlib import Path

from docsum.services.extraction.base import BaseExtractor


class TxtExtractor(BaseExtractor):
    """UTF-8 text; undecodable bytes become U+FFFD rather than failing the request."""

    @property
    def file_type(self) -> str:
        return "txt"

    def extract(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")
