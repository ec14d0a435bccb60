"""PDF text extraction with page metadata using pdfplumber."""

from __future__ import annotations

import io
from pathlib import Path

import pdfplumber


class PDFParseError(Exception):
    """Raised when the PDF cannot be parsed (corrupt or invalid)."""


def parse_pdf(source: str | Path | bytes) -> list[tuple[int, str]]:
    """
    Extract text from each page of a PDF.

    `source` is a filesystem path or the raw bytes of an upload.
    Returns a list of (page_number, text) tuples. Page numbers are 1-based.
    Raises FileNotFoundError if a path does not exist; PDFParseError on invalid/corrupt PDFs.
    """
    if isinstance(source, bytes):
        target = io.BytesIO(source)
        label = "<upload>"
    else:
        target = Path(source)
        label = str(target)
        if not target.exists():
            raise FileNotFoundError(f"PDF not found: {target}")
    try:
        with pdfplumber.open(target) as pdf:
            result: list[tuple[int, str]] = []
            for i, page in enumerate(pdf.pages, start=1):
                try:
                    text = page.extract_text()
                except Exception:
                    text = ""
                result.append((i, text or ""))
            return result
    except Exception as e:
        raise PDFParseError(f"Could not parse PDF {label}: {e}") from e
