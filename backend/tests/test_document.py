"""Tests for the document parsing service."""

import io

import fitz
import pytest
from docx import Document as DocxDocument

from errors import ValidationError
from services.document import (
    DocumentParseError,
    DocumentParser,
    EmptyDocumentError,
    FileTooLargeError,
)


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF containing text."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(*paragraphs: str) -> bytes:
    """Build a Word document with the given paragraphs."""
    doc = DocxDocument()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestDocumentParser:
    """Tests for DocumentParser."""

    @pytest.fixture(autouse=True)
    def _parser(self, settings):
        self.parser = DocumentParser(settings=settings)

    def test_sanitize_filename_basic(self):
        """Test basic filename sanitization."""
        assert self.parser.sanitize_filename("notes.txt") == "notes.txt"

    def test_sanitize_filename_path_traversal(self):
        """Test path traversal prevention."""
        result = self.parser.sanitize_filename("../../../etc/passwd")
        assert "/" not in result
        assert ".." not in result

    def test_sanitize_filename_special_chars(self):
        """Test special character removal."""
        result = self.parser.sanitize_filename('doc<>:"|?*.pdf')
        assert not set('<>:"|?*') & set(result)

    def test_sanitize_filename_long_name(self):
        """Test long filename truncation."""
        result = self.parser.sanitize_filename("a" * 300 + ".pdf")
        assert len(result) <= 255
        assert result.endswith(".pdf")

    def test_sanitize_filename_dot_start(self):
        """Test dot-starting filename handling."""
        assert not self.parser.sanitize_filename(".hidden").startswith(".")

    def test_validate_file_accepts_upload(self):
        assert self.parser.validate_file("Report.PDF", 1000) is None

    def test_validate_file_empty_name(self):
        with pytest.raises(ValidationError):
            self.parser.validate_file("", 1000)

    def test_validate_file_empty(self):
        """Test zero-byte files are rejected."""
        with pytest.raises(EmptyDocumentError):
            self.parser.validate_file("notes.txt", 0)

    def test_validate_file_too_large(self, settings):
        """Test rejection of files exceeding size limit."""
        with pytest.raises(FileTooLargeError):
            self.parser.validate_file("notes.txt", settings.max_file_size_bytes + 1)

    def test_detect_type(self):
        assert self.parser.detect_type("a.pdf", b"") == "pdf"
        assert self.parser.detect_type("upload", b"%PDF-1.7 ...") == "pdf"
        assert self.parser.detect_type("a.docx", b"PK") == "docx"
        assert self.parser.detect_type("notes.md", b"# hi") == "txt"
        assert self.parser.detect_type("notes", b"x", "application/pdf") == "pdf"

    @pytest.mark.asyncio
    async def test_parse_txt_verbatim(self, sample_text):
        """Test plain text is stored exactly as uploaded."""
        result = await self.parser.parse_bytes(sample_text.encode(), "notes.txt")

        assert result.text == sample_text
        assert result.filename == "notes.txt"
        assert result.document_type == "txt"

    @pytest.mark.asyncio
    async def test_parse_txt_latin1_fallback(self):
        result = await self.parser.parse_bytes("café".encode("latin-1"), "menu.txt")
        assert result.text == "café"

    @pytest.mark.asyncio
    async def test_parse_whitespace_only_rejected(self):
        """Test whitespace-only text is rejected."""
        with pytest.raises(EmptyDocumentError):
            await self.parser.parse_bytes(b"   \n\n\t ", "blank.txt")

    @pytest.mark.asyncio
    async def test_parse_pdf(self):
        result = await self.parser.parse_bytes(make_pdf("Quarterly report"), "q3.pdf")

        assert "Quarterly report" in result.text
        assert result.document_type == "pdf"
        assert result.page_count == 1

    @pytest.mark.asyncio
    async def test_parse_corrupt_pdf(self):
        """Test a corrupt PDF raises DocumentParseError."""
        with pytest.raises(DocumentParseError):
            await self.parser.parse_bytes(b"%PDF-1.4 not really a pdf", "bad.pdf")

    @pytest.mark.asyncio
    async def test_parse_docx(self):
        data = make_docx("First paragraph", "Second paragraph")

        result = await self.parser.parse_bytes(data, "memo.docx")

        assert result.text == "First paragraph\n\nSecond paragraph"
        assert result.document_type == "docx"

    @pytest.mark.asyncio
    async def test_parse_corrupt_docx(self):
        with pytest.raises(DocumentParseError):
            await self.parser.parse_bytes(b"not a zip file", "memo.docx")
