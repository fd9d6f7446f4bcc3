"""
Unit tests for PDFInputHandler.
"""
import base64
import unittest
from unittest.mock import patch

from pdf_verify.core.error_handling import PDFValidationError, FileEncodingError
from pdf_verify.services.pdf_input_handler import PDFInputHandler


class TestPDFInputHandler(unittest.TestCase):
    """Test cases for base64 decoding and filename handling."""

    def setUp(self):
        self.handler = PDFInputHandler()
        self.pdf_bytes = b"%PDF-1.4\n%fake body\n%%EOF"

    def test_decode_valid_pdf(self):
        encoded = base64.b64encode(self.pdf_bytes).decode("utf-8")
        self.assertEqual(self.handler.decode_base64_file(encoded, "a.pdf"), self.pdf_bytes)

    def test_decode_rejects_non_pdf(self):
        encoded = base64.b64encode(b"hello world").decode("utf-8")
        with self.assertRaises(PDFValidationError):
            self.handler.decode_base64_file(encoded)

    def test_decode_rejects_bad_base64(self):
        with self.assertRaises(FileEncodingError):
            self.handler.decode_base64_file("abc")

    @patch("pdf_verify.services.pdf_input_handler.settings")
    def test_decode_rejects_long_payload(self, mock_settings):
        mock_settings.MAX_BASE64_LENGTH = 8
        mock_settings.MAX_UPLOAD_MB = 25
        encoded = base64.b64encode(self.pdf_bytes).decode("utf-8")
        with self.assertRaises(PDFValidationError):
            self.handler.decode_base64_file(encoded)

    @patch("pdf_verify.services.pdf_input_handler.settings")
    def test_decode_rejects_large_pdf(self, mock_settings):
        mock_settings.MAX_BASE64_LENGTH = 40_000_000
        mock_settings.MAX_UPLOAD_MB = 0
        encoded = base64.b64encode(self.pdf_bytes).decode("utf-8")
        with self.assertRaises(PDFValidationError):
            self.handler.decode_base64_file(encoded)

    def test_sanitize_filename(self):
        self.assertEqual(PDFInputHandler.sanitize_filename("../../etc/report.pdf"), "report.pdf")
        self.assertEqual(PDFInputHandler.sanitize_filename("notes"), "notes.pdf")
        self.assertEqual(PDFInputHandler.sanitize_filename("a\x00b.pdf"), "ab.pdf")


if __name__ == "__main__":
    unittest.main()
