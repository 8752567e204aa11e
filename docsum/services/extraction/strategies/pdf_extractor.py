"""PDF text extraction with pypdf."""

from pathlib import Path

from pypdf import PdfReader

from docsum.services.extraction.base import BaseExtractor


class PdfExtractor(BaseExtractor):
    """Concatenates page text in page order, one newline after each page."""

    @property
    def file_type(self) -> str:
        return "pdf"

    def extract(self, path: Path) -> str:
        reader = PdfReader(str(path))
        parts: list[str] = []
        for page in reader.pages:
            parts.append((page.extract_text() or "") + "\n")
        return "".join(parts).strip()
