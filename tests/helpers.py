"""
Shared test doubles and PDF builders.
"""
import asyncio
import io
from typing import Dict, List, Optional, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from pdf_verify.services.document import DocumentLoader, ParsedDocument


def build_pdf(pages: Sequence[Sequence[str]], title: Optional[str] = None) -> bytes:
    """Create a PDF with one drawString per line; each inner sequence is a page."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    if title is not None:
        pdf.setTitle(title)
    for lines in pages:
        y = 780
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 24
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


class FakeDocument(ParsedDocument):
    """In-memory ParsedDocument; pages are lists of text fragments."""

    def __init__(
        self,
        pages: Optional[List[List[str]]] = None,
        metadata: Optional[Dict[str, str]] = None,
        metadata_error: Optional[Exception] = None,
        page_error: Optional[Exception] = None
    ):
        self.pages = pages or []
        self.metadata = metadata or {}
        self.metadata_error = metadata_error
        self.page_error = page_error
        self.metadata_calls = 0
        self.requested_pages: List[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    async def get_metadata(self) -> Dict[str, str]:
        self.metadata_calls += 1
        await asyncio.sleep(0)
        if self.metadata_error is not None:
            raise self.metadata_error
        return dict(self.metadata)

    async def get_page_text(self, page_number: int) -> List[str]:
        self.requested_pages.append(page_number)
        await asyncio.sleep(0)
        if self.page_error is not None:
            raise self.page_error
        return list(self.pages[page_number - 1])

    async def close(self) -> None:
        self.closed = True


class FakeLoader(DocumentLoader):
    """Returns a prepared document, or raises a prepared error."""

    def __init__(self, document: Optional[ParsedDocument] = None, error: Optional[Exception] = None):
        self.document = document
        self.error = error
        self.calls: List[object] = []

    async def load(self, source):
        self.calls.append(source)
        if self.error is not None:
            raise self.error
        return self.document


class ExplodingLoader(DocumentLoader):
    """Fails the test if anything tries to load a document."""

    async def load(self, source):
        raise AssertionError(f"loader must not be called (source={source!r})")


def scenario_document(**kwargs) -> FakeDocument:
    """Three pages, title "Spec", "HelloWorld" split over two fragments on page 1."""
    return FakeDocument(
        pages=[["Hello", "World"], ["Second page"], ["Third page"]],
        metadata={"Title": "Spec", "Author": "QA"},
        **kwargs
    )
