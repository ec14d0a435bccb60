"""FastAPI backend for Kord Legal — AI legal brief investigator."""

import logging
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kord import __version__
from kord.config import get_settings

settings = get_settings()

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=getattr(logging, settings.kord_log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Kord Legal API",
    description="Upload or paste a legal brief and investigate its citations and claims.",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
cors_origins = settings.cors_origin_list
cors_origin_regex = settings.cors_origin_regex
logger.info("CORS configured for origins: %s", cors_origins)
if cors_origin_regex:
    logger.info("CORS origin regex: %s", cors_origin_regex)

if not settings.api_key:
    logger.warning("OPENROUTER_API_KEY not set — /api/verify and /api/investigate will return 401.")

cors_kw: dict = {
    "allow_origins": cors_origins,
    "allow_credentials": True,
    "allow_methods": ["*"],
    "allow_headers": ["*"],
}
if cors_origin_regex:
    cors_kw["allow_origin_regex"] = cors_origin_regex
app.add_middleware(CORSMiddleware, **cors_kw)


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------
class HealthResponse(BaseModel):
    status: str
    upstream_configured: bool


@app.get("/health", response_model=HealthResponse)
@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", upstream_configured=bool(get_settings().api_key))


@app.get("/api/")
async def root():
    """API root."""
    return {"message": "Kord Legal API", "version": __version__}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
from backend.routes import documents, investigations, pages, proxy  # noqa: E402

app.include_router(proxy.router, prefix="/api", tags=["proxy"])
app.include_router(documents.router, prefix="/api", tags=["documents"])
app.include_router(investigations.router, prefix="/api", tags=["investigations"])
app.include_router(pages.router, tags=["pages"])
