"""
Validation package for checking PDFs against caller expectations.

- field_validators.py: page count, metadata title and text phrase checks
- validation_orchestrator.py: PdfValidationService fan-out/fan-in and validate_pdf
"""
from .validation_orchestrator import PdfValidationService, get_validation_service, validate_pdf
from .field_validators import validate_page_count, validate_title, validate_text_phrases

__all__ = [
    'PdfValidationService',
    'get_validation_service',
    'validate_pdf',
    'validate_page_count',
    'validate_title',
    'validate_text_phrases',
]
