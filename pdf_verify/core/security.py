"""
Bearer token guard for the verification endpoints.
"""
import logging
import secrets

from fastapi import Security, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from pdf_verify.core.config import settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def token_matches(token: str, expected: str) -> bool:
    """Constant-time comparison of a presented token against the configured one."""
    return secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


async def verify_api_key(credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)) -> bool:
    """
    Gate /verify* routes behind ``Authorization: Bearer <API_KEY>``.

    A no-op when REQUIRE_API_KEY is false, which is the default for local runs.

    Raises:
        HTTPException: 401 without a token, 403 for a wrong one, 500 when no key is configured
    """
    if not settings.REQUIRE_API_KEY:
        return True

    if not settings.API_KEY:
        logger.warning("REQUIRE_API_KEY is set but API_KEY is empty; rejecting verification request")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API authentication is not properly configured"
        )

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token is required. Provide Authorization: Bearer <token> header.",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if not token_matches(credentials.credentials, settings.API_KEY):
        logger.warning("Rejected verification request with an invalid bearer token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid bearer token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return True
