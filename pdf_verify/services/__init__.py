"""Services package for PDF loading, input decoding and expectation validation."""

from pdf_verify.services.document import (
    ParsedDocument,
    DocumentLoader,
    PypdfDocument,
    PypdfDocumentLoader
)
from pdf_verify.services.pdf_input_handler import PDFInputHandler
from pdf_verify.services.validation import PdfValidationService, get_validation_service, validate_pdf

__all__ = [
    'ParsedDocument',
    'DocumentLoader',
    'PypdfDocument',
    'PypdfDocumentLoader',
    'PDFInputHandler',
    'PdfValidationService',
    'get_validation_service',
    'validate_pdf',
]
