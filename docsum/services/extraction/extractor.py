"""Resolve an upload's file type and run the matching extractor off the event loop."""

from pathlib import Path, PurePath

from fastapi.concurrency import run_in_threadpool

from docsum.config.logging import get_logger
from docsum.services.errors import DocumentValidationError, ExtractionError
from docsum.services.extraction.strategies import EXTRACTOR_REGISTRY, get_extractor

logger = get_logger(__name__)

SUPPORTED_FILE_TYPES: frozenset[str] = frozenset(EXTRACTOR_REGISTRY)
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Use PDF, DOCX, or TXT."


def resolve_file_type(filename: str | None) -> str:
    """Return the lower-cased extension of filename. Raises DocumentValidationError if unsupported."""
    suffix = PurePath(filename or "").suffix.lower().lstrip(".")
    if suffix not in SUPPORTED_FILE_TYPES:
        raise DocumentValidationError(UNSUPPORTED_FILE_MESSAGE)
    return suffix


async def extract_text(path: Path, file_type: str) -> str:
    """
    Extract raw text from a stored file. Any extractor failure is reported as ExtractionError;
    the caller owns the file and its cleanup.
    """
    extractor = get_extractor(file_type)
    if extractor is None:
        raise DocumentValidationError(UNSUPPORTED_FILE_MESSAGE)
    try:
        text = await run_in_threadpool(extractor.extract, path)
    except Exception as e:
        logger.warning(
            "Text extraction failed",
            extra={"file_type": file_type, "error_type": type(e).__name__},
        )
        raise ExtractionError(f"Could not extract text from {file_type.upper()} file", cause=e) from e
    logger.info("Text extracted", extra={"file_type": file_type, "chars": len(text)})
    return text
