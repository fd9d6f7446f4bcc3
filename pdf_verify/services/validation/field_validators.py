"""
Field validators: one coroutine per supported expectation field.

Each returns a Finding when the expectation is not met and None otherwise.
Only the title validator catches its own I/O failure; anything else a
validator raises is turned into a LocalFailure by the validation service.
"""
import asyncio
import logging
from typing import Optional, Sequence

from pdf_verify.core.constants import (
    PAGE_NUM_FIELD,
    TITLE_FIELD,
    TEXT_PHRASES_FIELD,
    TITLE_METADATA_KEY,
    PAGE_NUM_MISMATCH_TEMPLATE,
    TITLE_MISMATCH_TEMPLATE
)
from pdf_verify.models.report import Finding
from pdf_verify.services.document import ParsedDocument

logger = logging.getLogger(__name__)


async def validate_page_count(document: ParsedDocument, expected: int) -> Optional[Finding]:
    actual = document.page_count
    if actual == expected:
        return None
    return Finding(PAGE_NUM_FIELD, PAGE_NUM_MISMATCH_TEMPLATE.format(expected=expected, actual=actual))


async def validate_title(document: ParsedDocument, expected: str) -> Optional[Finding]:
    """
    Compare the declared metadata title with ``expected`` (exact, case-sensitive).

    A metadata read failure is reported as a title finding carrying the error
    text, not as a pipeline failure.
    """
    try:
        metadata = await document.get_metadata()
    except Exception as e:
        logger.warning(f"Could not read PDF metadata: {e}")
        return Finding(TITLE_FIELD, str(e) or type(e).__name__)

    if metadata.get(TITLE_METADATA_KEY) == expected:
        return None
    # The actual title is not echoed back
    return Finding(TITLE_FIELD, TITLE_MISMATCH_TEMPLATE.format(expected=expected))


async def validate_text_phrases(document: ParsedDocument, expected: Sequence[str]) -> Optional[Finding]:
    """
    Check that every phrase occurs literally on at least one page.

    Pages are fetched concurrently and searched independently, so a phrase
    split across a page break is reported as missing. Fragments of one page
    are joined without separators.
    """
    page_numbers = range(1, document.page_count + 1)
    fragments_per_page = await asyncio.gather(
        *[document.get_page_text(page_number) for page_number in page_numbers]
    )
    pages = ["".join(fragments) for fragments in fragments_per_page]

    missing = [phrase for phrase in expected if not any(phrase in page for page in pages)]
    if not missing:
        return None
    return Finding(TEXT_PHRASES_FIELD, missing)
