"""
Shared HTTP client utilities: configured AsyncClient and bounded download helper.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx

from pdf_verify.core.config import settings

logger = logging.getLogger(__name__)


def get_async_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    """Create a configured AsyncClient with shared limits/timeouts."""
    return httpx.AsyncClient(
        timeout=timeout or settings.HTTP_CLIENT_TIMEOUT,
        limits=httpx.Limits(
            max_keepalive_connections=settings.HTTP_MAX_KEEPALIVE_CONNECTIONS,
            max_connections=settings.HTTP_MAX_CONNECTIONS,
        ),
        follow_redirects=True,
    )


@asynccontextmanager
async def get_managed_client(
    persistent_client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None
):
    """
    Context manager for HTTP client lifecycle.

    Reuses persistent client if provided, creates temporary otherwise.

    Args:
        persistent_client: Optional persistent client to reuse
        timeout: Optional timeout override

    Yields:
        httpx.AsyncClient instance
    """
    should_close = persistent_client is None
    client = persistent_client or get_async_client(timeout=timeout)
    try:
        yield client
    finally:
        if should_close:
            await client.aclose()


async def download_bytes(
    client: httpx.AsyncClient,
    url: str,
    *,
    max_bytes: Optional[int] = None,
) -> bytes:
    """
    GET a URL and return its body, streaming so oversized payloads are cut off early.

    Raises:
        httpx.HTTPStatusError: On non-2xx responses
        ValueError: If the body exceeds max_bytes
    """
    limit = max_bytes if max_bytes is not None else settings.MAX_DOWNLOAD_MB * 1024 * 1024

    async with client.stream("GET", url) as response:
        response.raise_for_status()

        chunks = []
        received = 0
        async for chunk in response.aiter_bytes():
            received += len(chunk)
            if received > limit:
                raise ValueError(f"Download exceeds max allowed size of {limit} bytes")
            chunks.append(chunk)

    logger.debug(f"Downloaded {received} bytes from {url}")
    return b"".join(chunks)
