"""Pydantic schemas for reports and investigation state."""

from kord.schemas.models import (
    CriticalIssue,
    DocumentSegment,
    FilingReadiness,
    FilingVerdict,
    FormattingIssue,
    HallucinationSignal,
    HighlightSpan,
    Investigation,
    InvestigationReport,
    InvestigationStatus,
    IssueCategory,
    Severity,
)

__all__ = [
    "CriticalIssue",
    "DocumentSegment",
    "FilingReadiness",
    "FilingVerdict",
    "FormattingIssue",
    "HallucinationSignal",
    "HighlightSpan",
    "Investigation",
    "InvestigationReport",
    "InvestigationStatus",
    "IssueCategory",
    "Severity",
]
