"""Base text extractor and contract."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseExtractor(ABC):
    """
    Abstract text extractor. Given a stored file path, returns the raw text.
    Whitespace normalization is left to the summarization pipeline.
    """

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Read the file at path and return its plain text. May raise on unreadable input."""
        ...

    @property
    @abstractmethod
    def file_type(self) -> str:
        """Extension handled by this extractor, e.g. 'pdf'."""
        ...
