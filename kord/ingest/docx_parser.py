"""DOCX text extraction using python-docx."""

from __future__ import annotations

import io

import docx


def parse_docx(content: bytes) -> str:
    """Return body paragraphs followed by table cell text, one block per line."""
    document = docx.Document(io.BytesIO(content))
    parts = [para.text for para in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)
