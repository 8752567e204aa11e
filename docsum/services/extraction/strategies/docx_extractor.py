"""DOCX text extraction with python-docx."""

from pathlib import Path

from docx import Document

from docsum.services.extraction.base import BaseExtractor


class DocxExtractor(BaseExtractor):
    """
    Raw text of a Word document: body paragraphs in order, then the text of
    table cells (python-docx does not list tables among paragraphs).
    """

    @property
    def file_type(self) -> str:
        return "docx"

    def extract(self, path: Path) -> str:
        doc = Document(str(path))
        parts = [p.text for p in doc.paragraphs]
        for table in doc.tables:
            for row in table.rows:
                parts.extend(cell.text for cell in row.cells)
        return "\n".join(parts)
