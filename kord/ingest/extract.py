"""Turn an uploaded brief (.txt, .pdf, .docx) into plain text."""

from __future__ import annotations

import logging
from pathlib import PurePath

from kord.ingest.docx_parser import parse_docx
from kord.ingest.pdf_parser import PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".pdf", ".docx")
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload a .txt, .pdf, or .docx file."


class UnsupportedFileTypeError(ValueError):
    """Raised for uploads whose extension is not a supported brief format."""

    def __init__(self, filename: str = ""):
        super().__init__(UNSUPPORTED_FILE_MESSAGE)
        self.filename = filename


class ExtractionError(Exception):
    """Raised when a supported file cannot be read."""


def file_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lower()


def is_supported(filename: str) -> bool:
    return file_extension(filename) in SUPPORTED_EXTENSIONS


def _decode_text(content: bytes) -> str:
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionError("Could not read file: text files must be UTF-8 encoded.") from e
    return text.removeprefix("\ufeff")


def extract_text(filename: str, content: bytes) -> str:
    """
    Extract the text of a brief from an uploaded file.

    .txt files are returned exactly as uploaded; PDF pages are joined with a
    blank line; DOCX paragraphs and tables are joined with newlines.
    Raises UnsupportedFileTypeError or ExtractionError.
    """
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError(filename)

    if ext == ".txt":
        return _decode_text(content)

    if ext == ".pdf":
        try:
            pages = parse_pdf(content)
        except PDFParseError as e:
            raise ExtractionError(f"Could not read file: {e}") from e
        text = "\n\n".join(t.strip() for _, t in pages if t.strip())
        if not text:
            logger.warning("PDF %s produced no extractable text", filename)
        return text

    try:
        return parse_docx(content)
    except Exception as e:
        raise ExtractionError(f"Could not read file: {filename} is not a valid .docx document.") from e
