from fastapi import APIRouter

from pdf_verify import __version__
from pdf_verify.core.config import settings

router = APIRouter()

@router.get("/")
async def root():
    """Basic health check endpoint."""
    return {"message": "PDF Verify API", "status": "healthy"}

@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Reports the service version, authentication setup and input limits.
    """
    health_status = {
        "status": "healthy",
        "service": "PDF Verify",
        "version": __version__,
        "auth_required": settings.REQUIRE_API_KEY,
        "auth_configured": bool(settings.API_KEY),
        "max_upload_mb": settings.MAX_UPLOAD_MB,
        "max_download_mb": settings.MAX_DOWNLOAD_MB,
        "strict_parsing": settings.PDF_STRICT_PARSING,
    }

    if settings.REQUIRE_API_KEY and not settings.API_KEY:
        health_status["status"] = "degraded"
        health_status["warning"] = "REQUIRE_API_KEY is set but API_KEY is not configured"

    return health_status
