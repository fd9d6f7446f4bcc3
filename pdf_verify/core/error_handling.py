"""
Error handling utilities for PDF verification.

This module provides custom exceptions and the decorator used by the API layer
to translate them into HTTP errors. The validation core itself never raises:
it captures failures into the report's ``general`` field.
"""
import logging
import time
import uuid
from typing import Awaitable, Callable, TypeVar, ParamSpec
from functools import wraps
from contextvars import ContextVar

from fastapi import HTTPException

logger = logging.getLogger(__name__)

# Context variable for request ID tracking across async contexts
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Type variables for generic function signatures
P = ParamSpec('P')
T = TypeVar('T')


# ============================================================================
# Custom Exceptions
# ============================================================================

class PDFVerifyError(Exception):
    """Base exception for PDF verification errors."""
    pass


class DocumentLoadError(PDFVerifyError):
    """The PDF could not be fetched, read or parsed."""
    pass


class PDFValidationError(PDFVerifyError):
    """Input payload is not an acceptable PDF."""
    pass


class FileEncodingError(PDFVerifyError):
    """File encoding/decoding failed."""
    pass


# ============================================================================
# Error Handler Decorator
# ============================================================================

def handle_verification_errors(
    error_message: str = "Operation failed"
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator to handle errors in async API handlers.

    Converts input errors to appropriate HTTP exceptions and logs them,
    together with the request id and elapsed time.

    Args:
        error_message: Custom error message prefix

    Returns:
        Decorated coroutine function with error handling

    Example:
        @handle_verification_errors("Failed to verify PDF")
        async def verify(request: UrlVerifyRequest) -> VerificationResponse:
            ...
    """
    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            # Generate request ID if not already set
            if not request_id_var.get():
                request_id_var.set(str(uuid.uuid4()))

            request_id = request_id_var.get()
            start_time = time.time()

            try:
                logger.info(f"Starting {func.__name__}")
                result = await func(*args, **kwargs)
                elapsed = time.time() - start_time

                from pdf_verify.core.config import settings
                threshold_ms = settings.RESPONSE_TIME_WARNING_THRESHOLD_MS
                elapsed_ms = elapsed * 1000
                if elapsed_ms > threshold_ms:
                    logger.warning(
                        f"SLOW RESPONSE: {func.__name__} took {elapsed:.2f}s "
                        f"({elapsed_ms:.0f}ms > {threshold_ms}ms threshold)"
                    )
                else:
                    logger.info(f"Completed {func.__name__} in {elapsed:.2f}s")

                return result
            except HTTPException:
                raise
            except (PDFValidationError, FileEncodingError) as e:
                elapsed = time.time() - start_time
                logger.error(f"{error_message} - Invalid PDF input after {elapsed:.2f}s: {e}")
                raise HTTPException(
                    status_code=400,
                    detail=f"Invalid PDF input: {str(e)}",
                    headers={"X-Request-ID": request_id}
                )
            except ValueError as e:
                elapsed = time.time() - start_time
                logger.error(f"{error_message} - Invalid value after {elapsed:.2f}s: {e}")
                raise HTTPException(
                    status_code=400,
                    detail=f"Invalid input: {str(e)}",
                    headers={"X-Request-ID": request_id}
                )
            except Exception as e:
                elapsed = time.time() - start_time
                logger.exception(f"{error_message} - Unexpected error in {func.__name__} after {elapsed:.2f}s: {e}")
                raise HTTPException(
                    status_code=500,
                    detail=f"{error_message}: {str(e)}",
                    headers={"X-Request-ID": request_id}
                )

        return wrapper

    return decorator


def describe_error(error: BaseException) -> str:
    """Render a captured failure as ``"<ExceptionType>: <message>"``."""
    message = str(error)
    if not message:
        return type(error).__name__
    return f"{type(error).__name__}: {message}"
