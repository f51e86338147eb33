"""Document parsing service for uploaded files.

Handles:
- File validation (size, filename)
- Text extraction from PDF (PyMuPDF) and DOCX (python-docx)
- Everything else is read as plain text (UTF-8, falling back to latin-1)
- Filename sanitization

Extracted text is kept verbatim; it must simply not be blank. Parsing is
blocking, so it runs in a worker thread via asyncio.to_thread.
"""

import asyncio
import io
import logging
import re
from pathlib import Path

import fitz  # PyMuPDF
from docx import Document as DocxDocument

from config import Settings, get_settings
from errors import ValidationError
from services.types import ParsedDocument

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


class DocumentParseError(Exception):
    """Raised when document parsing fails."""

    pass


class FileTooLargeError(Exception):
    """Raised when file exceeds size limit."""

    pass


class EmptyDocumentError(Exception):
    """Raised when document contains no extractable text."""

    pass


class DocumentParser:
    """Extracts plain text from uploaded file contents."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize document parser."""
        self.settings = settings or get_settings()

    def sanitize_filename(self, filename: str) -> str:
        """Sanitize filename to prevent path traversal and other issues."""
        filename = Path(filename or "").name
        filename = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", filename)

        max_length = 255
        if len(filename) > max_length:
            name, ext = Path(filename).stem, Path(filename).suffix
            filename = name[: max_length - len(ext)] + ext

        if not filename or filename.startswith("."):
            filename = "document" + Path(filename).suffix

        return filename

    def validate_file(self, filename: str, file_size: int) -> None:
        """Reject uploads with no name, no bytes or too many bytes."""
        if not filename:
            raise ValidationError("Filename cannot be empty")

        if file_size <= 0:
            raise EmptyDocumentError("File is empty")

        if file_size > self.settings.max_file_size_bytes:
            raise FileTooLargeError(
                f"File size {file_size} exceeds limit of {self.settings.max_file_size_mb}MB"
            )

    def detect_type(
        self,
        filename: str,
        data: bytes,
        content_type: str | None = None,
    ) -> str:
        """Classify the upload as 'pdf', 'docx' or 'txt'."""
        ext = Path(filename).suffix.lower()
        if ext == ".pdf" or content_type == PDF_MIME_TYPE or data.startswith(b"%PDF-"):
            return "pdf"
        if ext == ".docx" or content_type == DOCX_MIME_TYPE:
            return "docx"
        return "txt"

    async def parse_bytes(
        self,
        data: bytes,
        filename: str,
        content_type: str | None = None,
    ) -> ParsedDocument:
        """Extract text from uploaded file contents.

        Raises:
            FileTooLargeError: If the upload exceeds the size limit.
            EmptyDocumentError: If no readable text was found.
            DocumentParseError: If the file could not be decoded.
        """
        self.validate_file(filename, len(data))
        document_type = self.detect_type(filename, data, content_type)

        try:
            if document_type == "pdf":
                text, page_count = await asyncio.to_thread(self._parse_pdf_sync, data)
            elif document_type == "docx":
                text, page_count = await asyncio.to_thread(self._parse_docx_sync, data)
            else:
                text, page_count = self._parse_txt_sync(data), None
        except DocumentParseError:
            raise
        except Exception as e:
            logger.error("Failed to parse document %s: %s", filename, e)
            raise DocumentParseError(f"Failed to parse document: {e}") from e

        if not text.strip():
            raise EmptyDocumentError("No readable text found")

        return ParsedDocument(
            text=text,
            filename=self.sanitize_filename(filename),
            document_type=document_type,
            page_count=page_count,
        )

    def _parse_pdf_sync(self, data: bytes) -> tuple[str, int]:
        """Parse PDF bytes using PyMuPDF (synchronous)."""
        doc = None
        try:
            doc = fitz.open(stream=data, filetype="pdf")
            text_parts = []
            page_count = len(doc)

            for page_num, page in enumerate(doc, start=1):
                try:
                    page_text = page.get_text()
                    if page_text:
                        text_parts.append(page_text)
                except Exception as e:
                    logger.warning(
                        "Failed to extract text from page %d: %s", page_num, e
                    )

            return "\n\n".join(text_parts), page_count

        except Exception as e:
            raise DocumentParseError(f"Failed to parse PDF: {e}") from e
        finally:
            if doc is not None:
                doc.close()

    def _parse_docx_sync(self, data: bytes) -> tuple[str, None]:
        """Parse Word document bytes using python-docx (synchronous)."""
        try:
            doc = DocxDocument(io.BytesIO(data))
            text_parts = [p.text for p in doc.paragraphs if p.text.strip()]

            for table in doc.tables:
                for row in table.rows:
                    row_text = " | ".join(cell.text.strip() for cell in row.cells)
                    if row_text.strip():
                        text_parts.append(row_text)

            return "\n\n".join(text_parts), None

        except Exception as e:
            raise DocumentParseError(f"Failed to parse DOCX: {e}") from e

    def _parse_txt_sync(self, data: bytes) -> str:
        """Decode plain text."""
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return data.decode("latin-1")
