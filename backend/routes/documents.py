"""Document upload route: extract brief text from .txt, .pdf or .docx."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from backend.dependencies import settings_dependency
from kord.config import Settings
from kord.ingest import ExtractionError, UnsupportedFileTypeError, extract_text

logger = logging.getLogger(__name__)
router = APIRouter()


class ExtractResponse(BaseModel):
    filename: str
    text: str
    char_count: int


@router.post("/extract", response_model=ExtractResponse)
async def extract_document(
    file: UploadFile = File(..., description="Brief to read (.txt, .pdf or .docx)"),
    settings: Settings = Depends(settings_dependency),
):
    """Return the plain text of an uploaded brief so the page can fill its text area."""
    filename = file.filename or ""
    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
        )

    try:
        text = extract_text(filename, content)
    except UnsupportedFileTypeError as e:
        logger.info("Rejected upload %s: unsupported type", filename)
        raise HTTPException(status_code=400, detail=str(e))
    except ExtractionError as e:
        logger.warning("Extraction failed for %s: %s", filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Extracted %d chars from %s", len(text), filename)
    return ExtractResponse(filename=filename, text=text, char_count=len(text))
