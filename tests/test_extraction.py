"""
Tests for file type resolution, text extractors, and staged upload cleanup.

Files are created in pytest's tmp_path.
"""

import io

import pytest
from docx import Document as DocxDocument
from fastapi import UploadFile
from pypdf import PdfWriter
from reportlab.pdfgen import canvas

from docsum.services.errors import DocumentValidationError, ExtractionError
from docsum.services.extraction import uploads
from docsum.services.extraction.extractor import extract_text, resolve_file_type
from docsum.services.extraction.strategies import pdf_extractor
from docsum.services.extraction.strategies.pdf_extractor import PdfExtractor
from docsum.services.extraction.uploads import stage_upload


class TestResolveFileType:
    """Tests for extension checks."""

    @pytest.mark.parametrize(
        "filename, expected",
        [("report.pdf", "pdf"), ("Notes.DOCX", "docx"), ("a.b.txt", "txt")],
    )
    def test_supported(self, filename, expected):
        assert resolve_file_type(filename) == expected

    @pytest.mark.parametrize("filename", ["data.csv", "archive.pdf.zip", "noext", "", None])
    def test_unsupported(self, filename):
        with pytest.raises(DocumentValidationError, match="Unsupported file type"):
            resolve_file_type(filename)


class TestExtractors:
    """Tests for PDF, DOCX, and TXT extraction."""

    async def test_txt(self, tmp_path):
        path = tmp_path / "note.txt"
        path.write_text("Plain text\nwith two lines.", encoding="utf-8")

        assert await extract_text(path, "txt") == "Plain text\nwith two lines."

    async def test_txt_invalid_utf8_replaced(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"caf\xe9 menu")

        assert await extract_text(path, "txt") == "caf\ufffd menu"

    async def test_docx_paragraphs_and_tables(self, tmp_path):
        doc = DocxDocument()
        doc.add_paragraph("First paragraph.")
        doc.add_paragraph("Second paragraph.")
        table = doc.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Cell A"
        table.rows[0].cells[1].text = "Cell B"
        path = tmp_path / "doc.docx"
        doc.save(str(path))

        text = await extract_text(path, "docx")

        assert text.index("First paragraph.") < text.index("Second paragraph.")
        assert "Cell A" in text and "Cell B" in text

    async def test_pdf_without_text(self, tmp_path):
        writer = PdfWriter()
        writer.add_blank_page(width=72, height=72)
        writer.add_blank_page(width=72, height=72)
        path = tmp_path / "blank.pdf"
        with path.open("wb") as f:
            writer.write(f)

        assert await extract_text(path, "pdf") == ""

    async def test_corrupt_pdf_raises_extraction_error(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf")

        with pytest.raises(ExtractionError):
            await extract_text(path, "pdf")

    async def test_corrupt_docx_raises_extraction_error(self, tmp_path):
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a zip archive")

        with pytest.raises(ExtractionError):
            await extract_text(path, "docx")


class TestStageUpload:
    """Tests for the staged upload lifecycle."""

    async def test_file_available_inside_and_removed_after(self, tmp_path):
        upload = UploadFile(file=io.BytesIO(b"hello upload"), filename="hello.txt")

        async with stage_upload(upload, tmp_path / "up", max_bytes=1024) as path:
            assert path.exists()
            assert path.suffix == ".txt"
            assert path.read_bytes() == b"hello upload"

        assert not path.exists()
        assert list((tmp_path / "up").iterdir()) == []

    async def test_removed_when_body_raises(self, tmp_path):
        upload = UploadFile(file=io.BytesIO(b"data"), filename="x.pdf")

        with pytest.raises(ExtractionError):
            async with stage_upload(upload, tmp_path, max_bytes=1024) as path:
                raise ExtractionError("boom")

        assert not path.exists()

    async def test_oversized_rejected_and_removed(self, tmp_path):
        upload = UploadFile(file=io.BytesIO(b"x" * 100), filename="big.txt")

        with pytest.raises(DocumentValidationError, match="too large"):
            async with stage_upload(upload, tmp_path / "up", max_bytes=10):
                pass

        assert list((tmp_path / "up").iterdir()) == []

    async def test_blocks_written_through_worker_thread(self, tmp_path, monkeypatch):
        """Every block read from the upload is written off the event loop, in order."""
        written_blocks = []

        async def recording_threadpool(func, *args):
            written_blocks.append(args[0])
            return func(*args)

        monkeypatch.setattr(uploads, "READ_BLOCK_SIZE", 4)
        monkeypatch.setattr(uploads, "run_in_threadpool", recording_threadpool)
        upload = UploadFile(file=io.BytesIO(b"abcdefghij"), filename="blocks.txt")

        async with stage_upload(upload, tmp_path, max_bytes=1024) as path:
            assert path.read_bytes() == b"abcdefghij"

        assert written_blocks == [b"abcd", b"efgh", b"ij"]


def _write_text_pdf(path, pages: list[str]) -> None:
    pdf = canvas.Canvas(str(path))
    for line in pages:
        pdf.drawString(72, 720, line)
        pdf.showPage()
    pdf.save()


class TestPdfPages:
    """Tests for page order and separators in PDF extraction."""

    async def test_pages_in_order_one_newline_each(self, tmp_path):
        path = tmp_path / "three_pages.pdf"
        _write_text_pdf(path, ["Alpha page one", "Bravo page two", "Charlie page three"])

        text = await extract_text(path, "pdf")

        lines = [line.strip() for line in text.split("\n")]
        assert lines == ["Alpha page one", "Bravo page two", "Charlie page three"]

    def test_separator_kept_for_empty_page(self, tmp_path, monkeypatch):
        class FakePage:
            def __init__(self, text):
                self._text = text

            def extract_text(self):
                return self._text

        class FakeReader:
            def __init__(self, _path):
                self.pages = [FakePage("first"), FakePage(None), FakePage("third")]

        monkeypatch.setattr(pdf_extractor, "PdfReader", FakeReader)

        assert PdfExtractor().extract(tmp_path / "any.pdf") == "first\n\nthird"
