"""Locate quoted issue passages inside the brief for inline highlighting."""

from __future__ import annotations

import re

from kord.schemas.models import CriticalIssue, DocumentSegment, HighlightSpan, InvestigationReport


def find_highlights(text: str, report: InvestigationReport) -> list[HighlightSpan]:
    """
    Return non-overlapping spans of `text` quoted by the report's issues.

    Matching is case-insensitive and takes the first occurrence of each quote.
    Offsets index the original `text`. When two quotes overlap, the one that
    starts first (then the longer one) wins.
    """
    if not text:
        return []
    candidates: list[HighlightSpan] = []
    for issue in report.quoted_issues():
        quote = issue.quote.strip()
        if not quote:
            continue
        match = re.search(re.escape(quote), text, re.IGNORECASE)
        if match is None:
            continue
        kind = "critical" if isinstance(issue, CriticalIssue) else "formatting"
        candidates.append(
            HighlightSpan(start=match.start(), end=match.end(), issue_id=issue.issue_id, kind=kind)
        )

    candidates.sort(key=lambda s: (s.start, -(s.end - s.start)))
    spans: list[HighlightSpan] = []
    for span in candidates:
        if spans and span.start < spans[-1].end:
            continue
        spans.append(span)
    return spans


def segment_text(text: str, spans: list[HighlightSpan]) -> list[DocumentSegment]:
    """Split `text` into consecutive segments covering all of it, in order."""
    segments: list[DocumentSegment] = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        if span.start > cursor:
            segments.append(DocumentSegment(text=text[cursor:span.start]))
        segments.append(
            DocumentSegment(text=text[span.start:span.end], issue_id=span.issue_id, kind=span.kind)
        )
        cursor = span.end
    if cursor < len(text):
        segments.append(DocumentSegment(text=text[cursor:]))
    return segments
