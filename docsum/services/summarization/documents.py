"""Turn request input (pasted text or an uploaded file) into a Document."""

from fastapi import UploadFile

from docsum.config.summarization.models import SummarizerConfig
from docsum.services.errors import DocumentValidationError
from docsum.services.extraction.extractor import extract_text, resolve_file_type
from docsum.services.extraction.uploads import stage_upload
from docsum.services.summarization.models import Document

SOURCE_KINDS = ("text", "file")


async def load_document(
    source_type: str | None,
    text: str | None,
    upload: UploadFile | None,
    config: SummarizerConfig,
) -> Document:
    """
    Validate the source and produce the raw document. In file mode the extension is
    checked before anything touches disk, and the staged copy is deleted after
    extraction regardless of outcome.
    """
    kind = (source_type or "text").strip().lower()
    if kind not in SOURCE_KINDS:
        raise DocumentValidationError("Invalid sourceType. Use: text | file")

    if kind == "text":
        return Document(raw_text=text or "", source_kind="text")

    if upload is None or not upload.filename:
        raise DocumentValidationError("No file uploaded")
    file_type = resolve_file_type(upload.filename)
    async with stage_upload(upload, config.upload_dir, config.max_upload_bytes) as path:
        raw_text = await extract_text(path, file_type)
    return Document(raw_text=raw_text, source_kind="file", filename=upload.filename)
