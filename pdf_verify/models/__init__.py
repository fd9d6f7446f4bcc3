"""Expectation, report and API models."""

from .expectations import (
    ExpectationSet,
    Expectation,
    PageCountExpectation,
    TitleExpectation,
    TextPhrasesExpectation
)
from .report import Finding, LocalFailure, ValidationReport
from .api_models import (
    Base64VerifyRequest,
    UrlVerifyRequest,
    ValidationErrors,
    VerificationResponse
)

__all__ = [
    "ExpectationSet",
    "Expectation",
    "PageCountExpectation",
    "TitleExpectation",
    "TextPhrasesExpectation",
    "Finding",
    "LocalFailure",
    "ValidationReport",
    "Base64VerifyRequest",
    "UrlVerifyRequest",
    "ValidationErrors",
    "VerificationResponse"
]
