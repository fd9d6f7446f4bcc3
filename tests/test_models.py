"""
Unit tests for expectation, report and API models.
"""
import base64
import unittest

from pydantic import ValidationError

from pdf_verify.core.error_handling import DocumentLoadError
from pdf_verify.models import (
    Base64VerifyRequest,
    ExpectationSet,
    PageCountExpectation,
    TextPhrasesExpectation,
    TitleExpectation,
    UrlVerifyRequest,
    ValidationReport,
    VerificationResponse,
    Finding
)


class TestExpectationSet(unittest.TestCase):
    """Test cases for ExpectationSet."""

    def test_camel_case_keys(self):
        """Wire names populate the fields."""
        expectations = ExpectationSet.coerce({"pageNum": 2, "title": "T", "textPhrases": ["a"]})
        self.assertEqual(expectations.page_num, 2)
        self.assertEqual(expectations.title, "T")
        self.assertEqual(expectations.text_phrases, ["a"])

    def test_python_names(self):
        """Attribute names are accepted too."""
        expectations = ExpectationSet(page_num=4)
        self.assertEqual(expectations.expectations(), [PageCountExpectation(4)])

    def test_unknown_keys_ignored(self):
        """Extra keys do not raise."""
        expectations = ExpectationSet.coerce({"author": "x", "title": "T"})
        self.assertEqual(expectations.expectations(), [TitleExpectation("T")])

    def test_expectations_in_field_order(self):
        """One tagged variant per present field."""
        expectations = ExpectationSet.coerce({"textPhrases": ["b", "a"], "pageNum": 1})
        self.assertEqual(
            expectations.expectations(),
            [PageCountExpectation(1), TextPhrasesExpectation(("b", "a"))]
        )

    def test_empty_and_none(self):
        """None and empty mappings have nothing to validate."""
        self.assertTrue(ExpectationSet.coerce(None).is_empty)
        self.assertTrue(ExpectationSet.coerce({}).is_empty)
        self.assertTrue(ExpectationSet.coerce({"pageNum": None}).is_empty)

    def test_empty_phrase_list_is_present(self):
        """An empty list is still an expectation."""
        self.assertFalse(ExpectationSet.coerce({"textPhrases": []}).is_empty)

    def test_coerce_returns_same_instance(self):
        expectations = ExpectationSet(title="T")
        self.assertIs(ExpectationSet.coerce(expectations), expectations)

    def test_wrong_types_rejected(self):
        """A single string is not a phrase list."""
        with self.assertRaises(ValidationError):
            ExpectationSet.coerce({"textPhrases": "Hello"})

    def test_lax_coercion_rejected(self):
        """Booleans and numeric strings are not page counts; numbers are not titles."""
        for bad in ({"pageNum": True}, {"pageNum": "3"}, {"pageNum": 3.0}, {"title": 5}, {"textPhrases": [1]}):
            with self.subTest(expectations=bad):
                with self.assertRaises(ValidationError):
                    ExpectationSet.coerce(bad)

    def test_field_names_on_variants(self):
        self.assertEqual(PageCountExpectation.field_name, "pageNum")
        self.assertEqual(TitleExpectation.field_name, "title")
        self.assertEqual(TextPhrasesExpectation.field_name, "textPhrases")


class TestValidationReport(unittest.TestCase):
    """Test cases for ValidationReport."""

    def test_empty_report(self):
        report = ValidationReport()
        self.assertEqual(report, {})
        self.assertFalse(report.has_errors)
        self.assertTrue(report.is_complete)
        self.assertIsNone(report.general)

    def test_from_findings(self):
        report = ValidationReport.from_findings([
            Finding("pageNum", "expect pdf has 2 pages, but has 1"),
            Finding("textPhrases", ["x"]),
        ])
        self.assertEqual(report, {"pageNum": "expect pdf has 2 pages, but has 1", "textPhrases": ["x"]})
        self.assertTrue(report.is_complete)

    def test_from_failure(self):
        error = DocumentLoadError("unreachable")
        report = ValidationReport.from_failure(error)
        self.assertIs(report.general, error)
        self.assertFalse(report.is_complete)
        self.assertTrue(report.has_errors)


class TestApiModels(unittest.TestCase):
    """Test cases for request/response models."""

    def setUp(self):
        self.valid_base64 = base64.b64encode(b"%PDF-1.4 test").decode("utf-8")

    def test_base64_request_defaults(self):
        request = Base64VerifyRequest(filename="a.pdf", file_content=self.valid_base64)
        self.assertTrue(request.expectations.is_empty)

    def test_base64_request_with_expectations(self):
        request = Base64VerifyRequest.model_validate({
            "filename": "a.pdf",
            "file_content": self.valid_base64,
            "expectations": {"pageNum": 3, "textPhrases": ["Total"]},
        })
        self.assertEqual(request.expectations.page_num, 3)

    def test_filename_must_be_pdf(self):
        with self.assertRaises(ValidationError) as context:
            Base64VerifyRequest(filename="a.txt", file_content=self.valid_base64)
        self.assertIn("must end with .pdf", str(context.exception))

    def test_invalid_base64(self):
        with self.assertRaises(ValidationError) as context:
            Base64VerifyRequest(filename="a.pdf", file_content="not valid base64!!!")
        self.assertIn("must be valid base64", str(context.exception))

    def test_url_scheme(self):
        with self.assertRaises(ValidationError):
            UrlVerifyRequest(url="ftp://example.test/a.pdf")

    def test_response_from_findings(self):
        report = ValidationReport.from_findings([Finding("textPhrases", ["Missing"])])
        response = VerificationResponse.from_report(report, source="a.pdf")
        self.assertFalse(response.valid)
        self.assertEqual(response.errors.text_phrases, ["Missing"])
        self.assertEqual(
            response.model_dump(by_alias=True, exclude_none=True)["errors"],
            {"textPhrases": ["Missing"]}
        )

    def test_response_from_failure(self):
        report = ValidationReport.from_failure(DocumentLoadError("unreachable"))
        response = VerificationResponse.from_report(report, source="a.pdf")
        self.assertEqual(response.errors.general, "DocumentLoadError: unreachable")
        self.assertIsNone(response.errors.page_num)

    def test_response_valid(self):
        response = VerificationResponse.from_report(ValidationReport(), source="a.pdf")
        self.assertTrue(response.valid)


if __name__ == "__main__":
    unittest.main()
