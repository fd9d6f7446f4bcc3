"""
PDF input handler for file upload and base64 decoding.

Turns API inputs into raw PDF bytes for the validation service, enforcing the
configured size limits. Nothing is written to disk.
"""
import base64
import binascii
import logging
from pathlib import Path

from fastapi import UploadFile

from pdf_verify.core.config import settings
from pdf_verify.core.constants import PDF_HEADER, PDF_HEADER_SEARCH_WINDOW
from pdf_verify.core.error_handling import PDFValidationError, FileEncodingError

logger = logging.getLogger(__name__)


class PDFInputHandler:
    """Handles PDF file input operations."""

    async def read_uploaded_file(self, file: UploadFile) -> bytes:
        """Read an uploaded PDF into memory.

        Args:
            file: UploadFile from FastAPI

        Returns:
            PDF bytes

        Raises:
            PDFValidationError: If the file is not a PDF or is too large
        """
        if not file.filename or not file.filename.lower().endswith('.pdf'):
            raise PDFValidationError("Only PDF files are supported")
        if file.content_type not in {"application/pdf", "application/octet-stream", None}:
            raise PDFValidationError("Invalid content type; only application/pdf is allowed")

        content = await file.read()
        self._enforce_size_limit(len(content))
        self._enforce_pdf_header(content)

        logger.info(f"Received uploaded file: {self.sanitize_filename(file.filename)} ({len(content)} bytes)")
        return content

    def decode_base64_file(self, base64_content: str, filename: str = "document.pdf") -> bytes:
        """Decode base64 content into PDF bytes.

        Args:
            base64_content: Base64-encoded PDF content
            filename: Original filename (for logging)

        Returns:
            PDF bytes

        Raises:
            PDFValidationError: If the payload is too large or not a PDF
            FileEncodingError: If base64 decoding fails
        """
        safe_filename = self.sanitize_filename(filename)
        logger.info(f"Decoding base64 content for: {safe_filename}")

        if len(base64_content) > settings.MAX_BASE64_LENGTH:
            raise PDFValidationError("Base64 payload too large")

        try:
            pdf_bytes = base64.b64decode(base64_content)
        except (binascii.Error, ValueError) as e:
            raise FileEncodingError(f"Failed to decode PDF from base64: {str(e)}")

        self._enforce_size_limit(len(pdf_bytes))
        self._enforce_pdf_header(pdf_bytes)

        logger.info(f"Decoded base64 file: {safe_filename} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Strip path components and control characters from filenames."""
        safe_name = Path(filename).name
        safe_name = "".join(ch for ch in safe_name if ch.isprintable())
        if not safe_name.lower().endswith(".pdf"):
            safe_name = f"{safe_name}.pdf"
        return safe_name

    def _enforce_size_limit(self, size_bytes: int):
        max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
        if size_bytes > max_bytes:
            raise PDFValidationError(
                f"PDF exceeds max allowed size of {settings.MAX_UPLOAD_MB} MB"
            )

    def _enforce_pdf_header(self, content: bytes):
        if PDF_HEADER not in content[:PDF_HEADER_SEARCH_WINDOW]:
            raise PDFValidationError("Uploaded content is not a PDF")
