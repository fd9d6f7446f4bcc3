"""
FastAPI application for verifying PDFs against expected page count,
metadata title and text phrases.
"""
from fastapi import FastAPI
import logging

from pdf_verify import __version__
from pdf_verify.api.routes import health, verification
from pdf_verify.core.logging import setup_logging
from pdf_verify.core.middleware import RequestIDMiddleware

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PDF Verify",
    description="API for checking PDFs against expected page count, title and text phrases",
    version=__version__
)

app.add_middleware(RequestIDMiddleware)

app.include_router(health.router)
app.include_router(verification.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, workers=1)
