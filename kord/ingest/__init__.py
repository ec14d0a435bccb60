"""Brief ingestion: extracting text from .txt, .pdf and .docx uploads."""

from kord.ingest.extract import (
    SUPPORTED_EXTENSIONS,
    UNSUPPORTED_FILE_MESSAGE,
    ExtractionError,
    UnsupportedFileTypeError,
    extract_text,
    is_supported,
)
from kord.ingest.pdf_parser import PDFParseError, parse_pdf

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "UNSUPPORTED_FILE_MESSAGE",
    "ExtractionError",
    "PDFParseError",
    "UnsupportedFileTypeError",
    "extract_text",
    "is_supported",
    "parse_pdf",
]
