"""Transient storage for uploaded files: write to disk, always delete on exit."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path, PurePath

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from docsum.config.logging import get_logger
from docsum.services.errors import DocumentValidationError
from docsum.utils.ids import generate_upload_id

logger = get_logger(__name__)

READ_BLOCK_SIZE = 1024 * 1024


def _format_size(num_bytes: int) -> str:
    if num_bytes >= 1024 * 1024:
        return f"{num_bytes / (1024 * 1024):g} MB"
    return f"{num_bytes} bytes"


@asynccontextmanager
async def stage_upload(upload: UploadFile, upload_dir: str | Path, max_bytes: int) -> AsyncIterator[Path]:
    """
    Stream the upload into upload_dir under a unique name and yield its path.
    Uploads larger than max_bytes are rejected. The file is removed on exit whether
    the body succeeded or raised.
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    suffix = PurePath(upload.filename or "").suffix.lower()
    path = directory / f"{generate_upload_id()}{suffix}"
    try:
        written = 0
        with path.open("wb") as out:
            while True:
                block = await upload.read(READ_BLOCK_SIZE)
                if not block:
                    break
                written += len(block)
                if written > max_bytes:
                    raise DocumentValidationError(f"File too large. Maximum size is {_format_size(max_bytes)}.")
                await run_in_threadpool(out.write, block)
        logger.info("Upload staged", extra={"bytes": written, "suffix": suffix})
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove staged upload", extra={"path": str(path), "error": str(e)})
