"""
Configuration settings for the application.
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Key Authentication
    API_KEY: Optional[str] = None  # Required when REQUIRE_API_KEY is True - set in environment or .env file
    REQUIRE_API_KEY: bool = True  # Set to False to disable API key authentication (not recommended for production)

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # Options: "text", "json"
    LOG_INCLUDE_REQUEST_ID: bool = True  # Include X-Request-ID in logs

    # HTTP Client Configuration (used when the PDF source is a URL)
    HTTP_CLIENT_TIMEOUT: float = 60.0  # Timeout for downloading remote PDFs (seconds)
    HTTP_MAX_KEEPALIVE_CONNECTIONS: int = 10  # Maximum number of keepalive connections
    HTTP_MAX_CONNECTIONS: int = 20  # Maximum total connections

    # Performance Monitoring
    RESPONSE_TIME_WARNING_THRESHOLD_MS: int = 30000  # Warn if requests take longer than 30s (milliseconds)

    # Input Guardrails
    MAX_DOWNLOAD_MB: int = 50  # Max size of a PDF fetched from a URL
    MAX_UPLOAD_MB: int = 25  # Max upload size for PDFs (uncompressed)
    MAX_BASE64_LENGTH: int = 40_000_000  # Max base64 characters (~30 MB decoded)

    # PDF Parsing
    PDF_STRICT_PARSING: bool = False  # pypdf strict mode: fail on recoverable syntax errors

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
