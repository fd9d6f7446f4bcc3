"""Validate PDFs against expected page count, metadata title and text phrases."""

from pdf_verify.models.expectations import ExpectationSet
from pdf_verify.models.report import ValidationReport
from pdf_verify.services.validation import PdfValidationService, validate_pdf

__version__ = "1.0.0"

__all__ = [
    "ExpectationSet",
    "ValidationReport",
    "PdfValidationService",
    "validate_pdf",
]
