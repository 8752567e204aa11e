"""Text extractor implementations, keyed by file extension."""

from docsum.services.extraction.base import BaseExtractor
from docsum.services.extraction.strategies.docx_extractor import DocxExtractor
from docsum.services.extraction.strategies.pdf_extractor import PdfExtractor
from docsum.services.extraction.strategies.txt_extractor import TxtExtractor

EXTRACTOR_REGISTRY: dict[str, type[BaseExtractor]] = {
    "pdf": PdfExtractor,
    "docx": DocxExtractor,
    "txt": TxtExtractor,
}


def get_extractor(file_type: str) -> BaseExtractor | None:
    """Return an extractor instance for the given extension, or None."""
    cls = EXTRACTOR_REGISTRY.get(file_type)
    if cls is None:
        return None
    return cls()
