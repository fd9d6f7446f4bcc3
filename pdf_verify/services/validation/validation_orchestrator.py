"""
Validation orchestration for PDF expectation checks.

Loads the document once, fans out one validator per expectation, waits for
all of them and folds their outcomes into a single ValidationReport.
"""
import asyncio
import logging
import time
from typing import Any, List, Mapping, Optional, Union

from pdf_verify.models.expectations import (
    Expectation,
    ExpectationSet,
    PageCountExpectation,
    TitleExpectation,
    TextPhrasesExpectation
)
from pdf_verify.models.report import Finding, LocalFailure, ValidationReport
from pdf_verify.services.document import (
    DocumentLoader,
    ParsedDocument,
    PDFSource,
    PypdfDocumentLoader,
    describe_source
)

from .field_validators import validate_page_count, validate_title, validate_text_phrases

logger = logging.getLogger(__name__)

ValidatorOutcome = Union[Finding, LocalFailure, None]
ExpectationsInput = Union[ExpectationSet, Mapping[str, Any], None]


class PdfValidationService:
    """Checks PDFs against expectation sets.

    The service holds no per-call state; one instance can serve concurrent calls.
    """

    def __init__(self, loader: Optional[DocumentLoader] = None):
        """
        Args:
            loader: Document loader (default: PypdfDocumentLoader)
        """
        self.loader = loader or PypdfDocumentLoader()

    async def validate(self, source: PDFSource, expectations: ExpectationsInput = None) -> ValidationReport:
        """
        Validate a PDF against the given expectations.

        Never raises: load failures and validator failures are returned as
        ``{"general": error}``; content mismatches as per-field entries.

        Args:
            source: Path, http(s) URL or raw bytes of the PDF
            expectations: ExpectationSet or mapping with pageNum/title/textPhrases

        Returns:
            ValidationReport (empty when everything matches or nothing was asked)
        """
        label = describe_source(source)
        try:
            expectation_set = ExpectationSet.coerce(expectations)
        except Exception as e:
            logger.warning(f"Invalid expectations for {label}: {e}")
            return ValidationReport.from_failure(e)

        pending = expectation_set.expectations()
        if not pending:
            logger.debug(f"No expectations for {label}, skipping load")
            return ValidationReport()

        fields = ", ".join(expectation.field_name for expectation in pending)
        logger.info(f"Validating {label}: {fields}")
        start_time = time.time()

        try:
            document = await self.loader.load(source)
            try:
                outcomes = await asyncio.gather(
                    *[self._run_validator(document, expectation) for expectation in pending]
                )
            finally:
                await document.close()
        except Exception as e:
            logger.warning(f"Could not validate {label}: {e}")
            return ValidationReport.from_failure(e)

        report = self._fold(outcomes)
        elapsed = time.time() - start_time
        if report.is_complete:
            logger.info(
                f"Validated {label} in {elapsed:.2f}s: "
                f"{len(report)} of {len(pending)} expectations not met"
            )
        return report

    async def _run_validator(self, document: ParsedDocument, expectation: Expectation) -> ValidatorOutcome:
        """Run one validator; a raised exception becomes a LocalFailure."""
        try:
            return await self._dispatch(document, expectation)
        except Exception as e:
            logger.warning(f"Validator for '{expectation.field_name}' failed: {e}")
            return LocalFailure(expectation.field_name, e)

    @staticmethod
    async def _dispatch(document: ParsedDocument, expectation: Expectation) -> Optional[Finding]:
        match expectation:
            case PageCountExpectation(expected=expected):
                return await validate_page_count(document, expected)
            case TitleExpectation(expected=expected):
                return await validate_title(document, expected)
            case TextPhrasesExpectation(expected=expected):
                return await validate_text_phrases(document, expected)
            case _:
                raise TypeError(f"Unsupported expectation: {expectation!r}")

    @staticmethod
    def _fold(outcomes: List[ValidatorOutcome]) -> ValidationReport:
        """Merge validator outcomes; any failure replaces the whole report."""
        failures = [outcome for outcome in outcomes if isinstance(outcome, LocalFailure)]
        if failures:
            # Findings from validators that did finish are discarded
            return ValidationReport.from_failure(failures[0].error)

        findings = [outcome for outcome in outcomes if isinstance(outcome, Finding)]
        for finding in findings:
            logger.debug(f"Expectation not met: {finding.field} -> {finding.message}")
        return ValidationReport.from_findings(findings)


# Singleton service instance
_service: Optional[PdfValidationService] = None


def get_validation_service() -> PdfValidationService:
    """Get singleton validation service instance (default pypdf loader)."""
    global _service
    if _service is None:
        _service = PdfValidationService()
    return _service


async def validate_pdf(
    source: PDFSource,
    expectations: ExpectationsInput = None,
    *,
    loader: Optional[DocumentLoader] = None
) -> ValidationReport:
    """
    Validate a PDF against expected page count, title and text phrases.

    Args:
        source: Path, http(s) URL or raw bytes of the PDF
        expectations: ExpectationSet or mapping, e.g. ``{"pageNum": 3, "textPhrases": ["Total"]}``
        loader: Custom document loader (default: pypdf)

    Returns:
        ValidationReport filled with all errors
    """
    service = PdfValidationService(loader) if loader is not None else get_validation_service()
    return await service.validate(source, expectations)
