"""
PDF verification API endpoints.

Each endpoint checks one PDF against an expectation set and returns the
per-field errors. Content mismatches and unreadable documents are both
reported in the response body; only malformed requests produce 4xx errors.
"""
from fastapi import APIRouter, File, Query, UploadFile, Depends
from typing import List, Optional
import logging

from pdf_verify.core.security import verify_api_key
from pdf_verify.core.error_handling import handle_verification_errors
from pdf_verify.models.api_models import Base64VerifyRequest, UrlVerifyRequest, VerificationResponse
from pdf_verify.models.expectations import ExpectationSet
from pdf_verify.services.pdf_input_handler import PDFInputHandler
from pdf_verify.services.validation import get_validation_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/verify",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(verify_api_key)]
)
@handle_verification_errors("Failed to verify uploaded PDF")
async def verify_uploaded_pdf(
    file: UploadFile = File(...),
    page_num: Optional[int] = Query(default=None, description="Expected number of pages"),
    title: Optional[str] = Query(default=None, description="Expected metadata title"),
    text_phrases: Optional[List[str]] = Query(default=None, description="Phrases that must occur (repeatable)")
):
    """
    Verify an uploaded PDF.

    Args:
        file: PDF file to verify
        page_num: Expected page count
        title: Expected metadata title
        text_phrases: Expected text phrases

    Returns:
        VerificationResponse with per-field errors
    """
    pdf_handler = PDFInputHandler()
    pdf_bytes = await pdf_handler.read_uploaded_file(file)

    expectations = ExpectationSet(page_num=page_num, title=title, text_phrases=text_phrases)
    report = await get_validation_service().validate(pdf_bytes, expectations)

    logger.info(f"Verified uploaded PDF: {file.filename}, errors={list(report.keys())}")
    return VerificationResponse.from_report(report, source=pdf_handler.sanitize_filename(file.filename))


@router.post(
    "/verify-json",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(verify_api_key)]
)
@handle_verification_errors("Failed to verify PDF from base64")
async def verify_base64_pdf(request: Base64VerifyRequest):
    """
    Verify a base64-encoded PDF.

    Args:
        request: JSON body with filename, base64 content and expectations

    Returns:
        VerificationResponse with per-field errors
    """
    pdf_handler = PDFInputHandler()
    pdf_bytes = pdf_handler.decode_base64_file(
        base64_content=request.file_content,
        filename=request.filename
    )

    report = await get_validation_service().validate(pdf_bytes, request.expectations)

    logger.info(f"Verified base64 PDF: {request.filename}, errors={list(report.keys())}")
    return VerificationResponse.from_report(report, source=request.filename)


@router.post(
    "/verify-url",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(verify_api_key)]
)
@handle_verification_errors("Failed to verify PDF from URL")
async def verify_remote_pdf(request: UrlVerifyRequest):
    """
    Download and verify a PDF from an http(s) URL.

    Download failures are reported as the ``general`` error.
    """
    report = await get_validation_service().validate(request.url, request.expectations)

    logger.info(f"Verified remote PDF: {request.url}, errors={list(report.keys())}")
    return VerificationResponse.from_report(report, source=request.url)
