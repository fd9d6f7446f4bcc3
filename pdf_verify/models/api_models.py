"""
Pydantic models for API request and response structures.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
import base64
import binascii

from pdf_verify.core.constants import GENERAL_FIELD
from pdf_verify.core.error_handling import describe_error
from pdf_verify.models.expectations import ExpectationSet
from pdf_verify.models.report import ValidationReport


class Base64VerifyRequest(BaseModel):
    """Request model for verifying a base64-encoded PDF."""

    filename: str = Field(..., description="Name of the PDF file (e.g., 'document.pdf')")
    file_content: str = Field(..., description="Base64-encoded PDF file content")
    expectations: ExpectationSet = Field(
        default_factory=ExpectationSet,
        description="Expected page count, title and text phrases. Absent fields are not checked."
    )

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Validate filename ends with .pdf."""
        if not v.lower().endswith('.pdf'):
            raise ValueError("Filename must end with .pdf")
        return v

    @field_validator('file_content')
    @classmethod
    def validate_base64(cls, v: str) -> str:
        """
        Validate that file_content is valid base64.

        Only the first block is decoded here; PDFInputHandler decodes the full payload.
        """
        if not v:
            raise ValueError("file_content cannot be empty")
        try:
            base64.b64decode(v[:4096], validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("file_content must be valid base64")
        return v


class UrlVerifyRequest(BaseModel):
    """Request model for verifying a PDF reachable over HTTP(S)."""

    url: str = Field(..., description="http(s) URL of the PDF")
    expectations: ExpectationSet = Field(default_factory=ExpectationSet)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v


class ValidationErrors(BaseModel):
    """Per-field errors; camelCase names match the expectation fields."""
    model_config = ConfigDict(populate_by_name=True)

    page_num: Optional[str] = Field(default=None, alias="pageNum")
    title: Optional[str] = None
    text_phrases: Optional[List[str]] = Field(default=None, alias="textPhrases")
    general: Optional[str] = Field(
        default=None,
        description="Validation could not run (load or extraction failure); other fields are empty"
    )


class VerificationResponse(BaseModel):
    """Response model for all verification endpoints."""

    source: str = Field(..., description="Filename or URL that was verified")
    valid: bool = Field(..., description="True when every expectation was met")
    errors: ValidationErrors = Field(default_factory=ValidationErrors)

    @classmethod
    def from_report(cls, report: ValidationReport, source: str) -> "VerificationResponse":
        payload = dict(report)
        if GENERAL_FIELD in payload:
            payload[GENERAL_FIELD] = describe_error(payload[GENERAL_FIELD])
        return cls(
            source=source,
            valid=not report.has_errors,
            errors=ValidationErrors.model_validate(payload),
        )
