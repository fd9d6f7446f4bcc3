"""
PDF document access for validation.

Defines the ParsedDocument/DocumentLoader contract the validators rely on and
the default pypdf-backed implementation. pypdf is synchronous, so every call
into a reader runs in a worker thread; calls on one document are serialized
because a PdfReader is not thread-safe.
"""
import asyncio
import io
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Union

import httpx
from pypdf import PdfReader

from pdf_verify.core.config import settings
from pdf_verify.core.constants import PDF_HEADER, PDF_HEADER_SEARCH_WINDOW
from pdf_verify.core.error_handling import DocumentLoadError
from pdf_verify.core.http_client import get_managed_client, download_bytes

logger = logging.getLogger(__name__)

PDFSource = Union[str, os.PathLike, bytes, bytearray]


class ParsedDocument(ABC):
    """A loaded PDF, owned by one validation call."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages; known as soon as the document is loaded."""

    @abstractmethod
    async def get_metadata(self) -> Dict[str, str]:
        """Document information entries, e.g. ``{"Title": "..."}``."""

    @abstractmethod
    async def get_page_text(self, page_number: int) -> List[str]:
        """Text fragments of a page, in content-stream order.

        Args:
            page_number: 1-indexed page number
        """

    async def close(self) -> None:
        """Release the underlying resources. Safe to call more than once."""


class DocumentLoader(ABC):
    """Turns a PDF source into a ParsedDocument."""

    @abstractmethod
    async def load(self, source: PDFSource) -> ParsedDocument:
        """
        Raises:
            DocumentLoadError: If the source is unreachable or not a readable PDF
        """


class PypdfDocument(ParsedDocument):
    """ParsedDocument backed by a pypdf PdfReader."""

    def __init__(self, reader: PdfReader, stream: io.BytesIO):
        self._reader = reader
        self._stream = stream
        self._page_count = len(reader.pages)
        self._lock = asyncio.Lock()

    @property
    def page_count(self) -> int:
        return self._page_count

    async def get_metadata(self) -> Dict[str, str]:
        async with self._lock:
            return await asyncio.to_thread(self._read_metadata)

    async def get_page_text(self, page_number: int) -> List[str]:
        if not 1 <= page_number <= self._page_count:
            raise IndexError(
                f"Page {page_number} out of range (document has {self._page_count} pages)"
            )
        async with self._lock:
            return await asyncio.to_thread(self._extract_fragments, page_number - 1)

    async def close(self) -> None:
        self._stream.close()

    def _read_metadata(self) -> Dict[str, str]:
        info = self._reader.metadata
        if info is None:
            return {}
        # Indexing resolves indirect objects; keys are PDF names like "/Title"
        return {str(key).lstrip("/"): str(info[key]) for key in info.keys()}

    def _extract_fragments(self, page_index: int) -> List[str]:
        fragments: List[str] = []

        def visitor_text(text, cm, tm, font_dict, font_size):
            # pypdf terminates each emitted line with a newline; fragments carry none
            text = text.rstrip("\r\n") if text else ""
            if text:
                fragments.append(text)

        self._reader.pages[page_index].extract_text(visitor_text=visitor_text)
        return fragments


class PypdfDocumentLoader(DocumentLoader):
    """Loads PDFs from bytes, filesystem paths or http(s) URLs using pypdf."""

    def __init__(
        self,
        password: str = "",
        strict: Optional[bool] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            password: Password for encrypted PDFs (empty string works for owner-only encryption)
            strict: pypdf strict mode (default from settings)
            http_client: Persistent client for URL sources (a temporary one is created otherwise)
        """
        self.password = password
        self.strict = settings.PDF_STRICT_PARSING if strict is None else strict
        self._http_client = http_client

    async def load(self, source: PDFSource) -> ParsedDocument:
        label = describe_source(source)
        try:
            data = await self._read_source(source)
            if PDF_HEADER not in data[:PDF_HEADER_SEARCH_WINDOW]:
                raise DocumentLoadError(f"{label} is not a PDF document")
            document = await asyncio.to_thread(self._parse, data)
        except DocumentLoadError:
            raise
        except Exception as e:
            raise DocumentLoadError(f"Failed to load PDF from {label}: {e}") from e

        logger.debug(f"Loaded {label}: {document.page_count} pages")
        return document

    async def _read_source(self, source: PDFSource) -> bytes:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        if isinstance(source, str) and source.lower().startswith(("http://", "https://")):
            async with get_managed_client(self._http_client) as client:
                return await download_bytes(client, source)
        return await asyncio.to_thread(Path(source).read_bytes)

    def _parse(self, data: bytes) -> PypdfDocument:
        stream = io.BytesIO(data)
        try:
            reader = PdfReader(stream, strict=self.strict)
            if reader.is_encrypted and not reader.decrypt(self.password):
                raise DocumentLoadError("PDF is encrypted and the password was rejected")
            return PypdfDocument(reader, stream)
        except Exception:
            stream.close()
            raise


def describe_source(source: PDFSource) -> str:
    """Short, log-safe description of a PDF source."""
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    return str(source)
