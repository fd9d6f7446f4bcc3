"""
Command line entry point: validate one PDF and print the report as JSON.

Exit codes: 0 all expectations met, 1 mismatches found, 2 validation could not run.
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from pdf_verify.core.error_handling import describe_error
from pdf_verify.core.logging import setup_logging
from pdf_verify.models.expectations import ExpectationSet
from pdf_verify.models.report import ValidationReport
from pdf_verify.services.document import PypdfDocumentLoader
from pdf_verify.services.validation import validate_pdf

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-verify",
        description="Check a PDF against expected page count, metadata title and text phrases"
    )
    parser.add_argument("source", help="Path or http(s) URL of the PDF")
    parser.add_argument("--pages", type=int, default=None, help="Expected number of pages")
    parser.add_argument("--title", default=None, help="Expected metadata title (exact match)")
    parser.add_argument(
        "--phrase",
        dest="phrases",
        action="append",
        default=None,
        help="Phrase that must occur on some page (repeatable)"
    )
    parser.add_argument("--password", default="", help="Password for encrypted PDFs")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def render_report(report: ValidationReport) -> str:
    payload = dict(report)
    if report.general is not None:
        payload["general"] = describe_error(report.general)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def exit_code_for(report: ValidationReport) -> int:
    if not report.is_complete:
        return EXIT_FAILURE
    return EXIT_MISMATCH if report.has_errors else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, stream=sys.stderr)

    expectations = ExpectationSet(page_num=args.pages, title=args.title, text_phrases=args.phrases)
    if expectations.is_empty:
        logger.warning("No expectations given; nothing to validate")

    loader = PypdfDocumentLoader(password=args.password)
    report = asyncio.run(validate_pdf(args.source, expectations, loader=loader))

    print(render_report(report))
    return exit_code_for(report)


if __name__ == "__main__":
    sys.exit(main())
